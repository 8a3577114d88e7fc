from __future__ import annotations

from app.ai.types import ChatMessage

SYSTEM_PROMPT = (
    "You are an advanced Applicant Tracking System (ATS). You evaluate a resume against a job "
    "description, score the match strictly, and rewrite the resume using only facts the candidate provided."
)

_MATCH_TEMPLATE = """Analyze the resume against the job description and answer using exactly these section headers, in order.

### Extracted Information:
- Resume: contact information, professional summary, work experience (titles, companies, dates, achievements), education, skills, certifications, projects.
- Job Description: job title, company, key responsibilities, required and preferred skills, education and experience requirements, certifications.

### Job Description Details:
Summarize the role in a few bullet points.

### Matching Analysis:
**Skills Matching:**
**Matching Skills:**
- one skill per line
**Missing Skills:**
- one skill per line
**Experience Matching:**
**Relevant Experience:**
- one item per line
**Missing Experience:**
- one item per line
**Education Matching:**
**Matching Education:**
- one item per line
**Missing Education:**
- one item per line

### Scoring:
Score strictly and deduct points for every missing skill, experience or education requirement.
- Skills Matching: N/40
- Experience Matching: N/30
- Education Matching: N/20
- Additional Qualifications: N/10
Total Score: N/100

### Recommendations:
**Skills to Add:**
- ...
**Experience to Highlight:**
- ...
**Education to Include:**
- ...
**Formatting and Presentation:**
- ...

### Summary:
**Strengths:**
- ...
**Weaknesses:**
- ...
**Overall Fit:** one short paragraph.

### Create an Improved Resume:
Rewrite the resume using only information from the candidate. Start each section with a bold label such as
**Contact Information:**, **Professional Summary:**, **Work Experience:**, **Education:**, **Skills:**,
**Certifications:**, **Projects:**. Write each job as "- **Company** (dates)" followed by indented "  - " achievement bullets.

Resume:
{resume_text}

Job Description:
{job_description}
"""


def build_match_messages(resume_text: str, job_description: str) -> list[ChatMessage]:
    user_prompt = _MATCH_TEMPLATE.format(
        resume_text=(resume_text or "").strip(),
        job_description=(job_description or "").strip(),
    )
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=user_prompt),
    ]
