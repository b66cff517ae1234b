from parsers.extract import (
    EDUCATION_NOT_SPECIFIED,
    EXPERIENCE_AVAILABLE,
    EXPERIENCE_NOT_SPECIFIED,
    UNKNOWN_CANDIDATE,
    TextExtractor,
)

extractor = TextExtractor()


def test_name_skips_document_title():
    text = "RESUME\n\nJohn Smith\nSoftware Engineer\njohn@example.com"
    assert extractor.extract_name(text) == "John Smith"


def test_name_skips_section_headers():
    text = "Contact Information\n  Jane Doe  \nPython developer"
    assert extractor.extract_name(text) == "Jane Doe"


def test_name_rejects_digits_and_single_words():
    text = "Portfolio\nJohn Smith 2024\nMaria Lopez Garcia"
    assert extractor.extract_name(text) == "Maria Lopez Garcia"


def test_name_rejects_more_than_four_words():
    text = "Anna Maria Louisa Van Berg\nAnna Berg"
    assert extractor.extract_name(text) == "Anna Berg"


def test_name_cv_substring_is_skipped():
    # "cv" inside a surname still counts as a title word
    text = "Victor Cvetkov\nSomething"
    assert extractor.extract_name(text) == "Victor Cvetkov"


def test_name_only_scans_first_ten_lines():
    text = "\n".join(["ab"] * 10 + ["Jane Doe"])
    assert extractor.extract_name(text) == "ab"


def test_name_fallbacks():
    assert extractor.extract_name("5 years React and AWS experience") == "5 years React and AWS experience"
    assert extractor.extract_name("") == UNKNOWN_CANDIDATE
    assert extractor.extract_name(" \n\t\n") == UNKNOWN_CANDIDATE


def test_experience_years_of_experience():
    assert extractor.extract_experience("Over 7+ years of experience in Python") == "7+ years experience"


def test_experience_label_first():
    assert extractor.extract_experience("Experience: 3 years") == "3+ years experience"


def test_experience_years_in():
    assert extractor.extract_experience("Worked 4 years in banking") == "4+ years experience"


def test_experience_pattern_priority():
    text = "Spent 2 years in retail.\n10 years of experience overall"
    assert extractor.extract_experience(text) == "10+ years experience"


def test_experience_section_without_numbers():
    assert extractor.extract_experience("WORK EXPERIENCE\nAcme Corp") == EXPERIENCE_AVAILABLE
    assert extractor.extract_experience("Employment history\nAcme") == EXPERIENCE_AVAILABLE


def test_experience_sentinel():
    assert extractor.extract_experience("Hobbies: chess") == EXPERIENCE_NOT_SPECIFIED
    assert extractor.extract_experience("") == EXPERIENCE_NOT_SPECIFIED


def test_education_section():
    text = (
        "Jane Doe\n"
        "EDUCATION\n"
        "B.Sc. Computer Science\n"
        "\n"
        "State University 2015\n"
        "\n"
        "EXPERIENCE\n"
        "Acme Corp\n"
    )
    assert extractor.extract_education(text) == "B.Sc. Computer Science State University 2015"


def test_education_stops_past_limit():
    line = "x" * 40
    text = "Education\n" + "\n".join([line] * 5)
    assert extractor.extract_education(text) == " ".join([line] * 3)


def test_education_stops_at_skills():
    assert extractor.extract_education("Education\nSkills: Python\nMIT") == EDUCATION_NOT_SPECIFIED


def test_education_sentinel():
    assert extractor.extract_education("Jane Doe\nPython") == EDUCATION_NOT_SPECIFIED
    assert extractor.extract_education("") == EDUCATION_NOT_SPECIFIED


def test_extract_profile():
    profile = extractor.extract("Jane Doe\n6 years of experience\nEducation\nMSc Physics")
    assert profile.name == "Jane Doe"
    assert profile.experience == "6+ years experience"
    assert profile.education == "MSc Physics"
