from interview_sim.interview import ResumeAnalysis, analyze

from conftest import SENIOR_RESUME


def test_senior_resume_with_react_and_project():
    analysis = analyze("Senior developer. Built things with React.\nproject: chat app")

    assert analysis.experience_level == "senior"
    assert "react" in analysis.technologies
    assert "chat app" in analysis.projects


def test_analysis_is_deterministic():
    assert analyze(SENIOR_RESUME) == analyze(SENIOR_RESUME)


def test_empty_resume_gives_default_analysis():
    for text in ("", "   \n", None):
        analysis = analyze(text)
        assert analysis == ResumeAnalysis()
        assert analysis.experience_level == "entry"
        assert analysis.technologies == ()
        assert analysis.projects == ()
        assert analysis.domains == ()


def test_no_indicator_defaults_to_entry():
    assert analyze("Knows Python and SQL.").experience_level == "entry"


def test_experience_level_precedence():
    assert analyze("Junior engineer, now team lead").experience_level == "senior"
    assert analyze("Junior engineer with 3+ years").experience_level == "mid"
    assert analyze("Intern at a startup").experience_level == "entry"


def test_technologies_follow_vocabulary_order():
    analysis = analyze("Docker, then Python")
    assert analysis.technologies.index("python") < analysis.technologies.index("docker")


def test_projects_capped_at_three():
    resume = "\n".join(f"Project: app {i}" for i in range(5))
    analysis = analyze(resume)

    assert analysis.projects == ("app 0", "app 1", "app 2")


def test_domains_detected():
    analysis = analyze(SENIOR_RESUME)
    assert analysis.domains == ("web development", "cloud computing")


def test_to_dict_uses_lists():
    data = analyze(SENIOR_RESUME).to_dict()
    assert set(data) == {"technologies", "projects", "experience_level", "domains"}
    assert isinstance(data["technologies"], list)
