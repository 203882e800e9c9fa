"""問題文のキーワードから分野や既知量を判定するルール表

判定は大文字・小文字を区別する単純な部分一致。ルールは上から順に評価し、
分野は最初に一致したものを採用する。
"""

from typing import List, NamedTuple, Optional, Sequence


class TopicRule(NamedTuple):
    pattern: str
    label: str


class KnownQuantityRule(NamedTuple):
    pattern: str
    present: str
    absent: str


GENERIC_TOPIC = "a general physics concept"

TOPIC_RULES: List[TopicRule] = [
    TopicRule("velocity", "kinematics"),
    TopicRule("resistance", "electric circuits"),
]

KNOWN_QUANTITY_RULES: List[KnownQuantityRule] = [
    KnownQuantityRule("mass", "Mass (m) is provided", "No mass mentioned"),
    KnownQuantityRule("velocity", "Initial velocity is given", "Velocity not specified"),
]


def match_topic(problem_text: str, rules: Sequence[TopicRule] = TOPIC_RULES) -> Optional[TopicRule]:
    for rule in rules:
        if rule.pattern in problem_text:
            return rule
    return None


def classify_topic(problem_text: str, rules: Sequence[TopicRule] = TOPIC_RULES,
                   default: str = GENERIC_TOPIC) -> str:
    """問題文の分野ラベルを返す"""
    rule = match_topic(problem_text, rules)
    return rule.label if rule else default


def describe_known_quantities(problem_text: str,
                              rules: Sequence[KnownQuantityRule] = KNOWN_QUANTITY_RULES) -> List[str]:
    """既知量ルールごとに、問題文に含まれるかどうかの説明文を返す"""
    return [rule.present if rule.pattern in problem_text else rule.absent for rule in rules]
