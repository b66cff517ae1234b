from matching.recommend import STRONG_MATCH_RECOMMENDATIONS, RecommendationGenerator

generator = RecommendationGenerator()


def test_names_first_two_missing_skills():
    assert generator.generate(("node.js", "docker", "aws")) == [
        "Consider developing skills in: node.js, docker",
        "Highlight relevant project experience in portfolio",
        "Consider adding industry certifications",
    ]


def test_single_missing_skill():
    assert generator.generate(["kubernetes"])[0] == "Consider developing skills in: kubernetes"


def test_no_missing_skills():
    recommendations = generator.generate([])
    assert recommendations == STRONG_MATCH_RECOMMENDATIONS
    recommendations.append("mutated")
    assert len(generator.generate([])) == 3
