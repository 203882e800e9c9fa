from dost.services.topic_rules import (
    GENERIC_TOPIC,
    TopicRule,
    classify_topic,
    describe_known_quantities,
)


def test_classify_topic_velocity():
    assert classify_topic("initial velocity of 3 m/s") == "kinematics"


def test_classify_topic_resistance():
    assert classify_topic("a resistance of 4 ohm") == "electric circuits"


def test_classify_topic_first_rule_wins():
    assert classify_topic("velocity of electrons through a resistance") == "kinematics"


def test_classify_topic_generic():
    assert classify_topic("integrate x^2") == GENERIC_TOPIC


def test_classify_topic_is_case_sensitive():
    assert classify_topic("Velocity is constant") == GENERIC_TOPIC


def test_classify_topic_custom_rules():
    rules = [TopicRule("photon", "modern physics")]
    assert classify_topic("a photon hits a metal", rules) == "modern physics"
    assert classify_topic("velocity", rules) == GENERIC_TOPIC


def test_describe_known_quantities():
    assert describe_known_quantities("mass 2kg, velocity 3 m/s") == [
        "Mass (m) is provided",
        "Initial velocity is given",
    ]
    assert describe_known_quantities("nothing here") == [
        "No mass mentioned",
        "Velocity not specified",
    ]
