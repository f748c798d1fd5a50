ANALYSIS_TEMPLATE = """Compare the following **resume** with the **job description** and provide a rating out of 10 based on relevance.
Suggest specific improvements and missing skills.

**Job Description:**
{job_description}

**Resume:**
{resume_text}

Provide a **rating out of 10**, followed by a **brief explanation** of the strengths, weaknesses, and improvements of the resume."""


def build_analysis_prompt(job_description: str, resume_text: str) -> str:
    return ANALYSIS_TEMPLATE.format(
        job_description=job_description,
        resume_text=resume_text,
    )
