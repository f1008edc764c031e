"""
Portfolio Copywriter

Writes the text of a personal portfolio page: headline, about section and a
short blurb per project.
"""

PROMPT_TEMPLATE = """\
You are a professional writer who crafts personal portfolio websites for tech professionals.

Write portfolio copy for {fullName}, a "{jobRole}".

Constraints:
- Length: 200 to 350 words.
- Tone: friendly, professional, and specific.
- Content: describe ONLY the projects and skills provided below (do not invent projects, clients, employers, awards, or metrics).
- Structure: a one-line headline, a short "About" paragraph, then 2-3 sentences per project.
- Formatting: plain text only, no markdown, no bullet symbols, no emojis, no code fences.

Projects (source of truth):
{projects}

Skills:
{skills}
{bio_block}
Return ONLY the final portfolio copy.
"""

BIO_BLOCK = """
Personal bio:
{bio}
"""
