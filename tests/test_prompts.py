from resume_check.prompts import build_analysis_prompt


def test_prompt_contains_both_inputs_verbatim() -> None:
    jd = "Looking for a data engineer with {Spark} and Airflow."
    resume = "Built Airflow DAGs; tuned Spark jobs by 40%."

    prompt = build_analysis_prompt(jd, resume)

    assert jd in prompt
    assert resume in prompt
    assert prompt.index(jd) < prompt.index(resume)


def test_prompt_asks_for_rating_and_improvements() -> None:
    prompt = build_analysis_prompt("jd", "resume")

    assert "rating out of 10" in prompt
    assert "missing skills" in prompt
    assert "strengths, weaknesses, and improvements" in prompt
