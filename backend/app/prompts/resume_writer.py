"""
Resume Writer

Turns the candidate's own experience and skills into resume content for a
target role. Optional education/projects sections are appended only when
provided.
"""

PROMPT_TEMPLATE = """\
You are an expert career coach and professional resume writer.

Write resume content for {fullName}, targeting the role of "{jobRole}".

Constraints:
- Length: under 600 words.
- Tone: concise, confident, and achievement-oriented.
- Content: use ONLY the information provided below (do not invent employers, job titles, dates, degrees, certifications, or metrics).
- Structure: a 2-3 sentence professional summary, then SKILLS, EXPERIENCE{extra_sections} sections.
- Formatting: plain text only, section names in capitals on their own line, no markdown, no code fences.

Experience (source of truth):
{experience}

Skills:
{skills}
{optional_blocks}
Return ONLY the final resume text.
"""

EDUCATION_BLOCK = """
Education:
{education}
"""

PROJECTS_BLOCK = """
Projects:
{projects}
"""
