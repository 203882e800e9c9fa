import logging
from abc import ABC, abstractmethod
from string import Template
from typing import Dict, Type

from dost.core.errors import UnknownProviderError
from dost.models.solve import SolutionResult
from dost.services.topic_rules import classify_topic, describe_known_quantities

logger = logging.getLogger(__name__)


class SolutionProvider(ABC):
    """問題文から解答を生成するバックエンドの共通インターフェース"""

    name = ""

    @abstractmethod
    def solve(self, problem_text: str) -> SolutionResult:
        ...


# $ 置換なので LaTeX の {} はそのまま書ける
SOLUTION_TEMPLATE = Template(r"""**Problem:** $problem

**Solution:**

1. **Understand the problem**: First, we need to identify what's being asked. The problem appears to be about $topic.

2. **Identify known quantities**: Let's list out the given information:
$knowns

3. **Choose appropriate formula**: Based on the problem, we should use:
   \[ F = ma \]
   where:
   - \(F\) is force
   - \(m\) is mass
   - \(a\) is acceleration

4. **Solve step-by-step**:
   - Step 1: Calculate acceleration
   - Step 2: Apply Newton's second law
   - Step 3: Verify units

5. **Final Answer**: After calculations, we find that the solution is \boxed{42} (mock answer for demonstration).""")


class TemplateSolutionProvider(SolutionProvider):
    """固定テンプレートにキーワード判定の結果を埋め込むモック実装"""

    name = "template"

    def solve(self, problem_text: str) -> SolutionResult:
        topic = classify_topic(problem_text)
        logger.info("Classified problem topic as %s", topic)
        knowns = "\n".join(f"   - {line}" for line in describe_known_quantities(problem_text))
        content = SOLUTION_TEMPLATE.substitute(
            problem=problem_text,
            topic=topic,
            knowns=knowns,
        )
        return SolutionResult(content=content)


PROVIDERS: Dict[str, Type[SolutionProvider]] = {
    TemplateSolutionProvider.name: TemplateSolutionProvider,
}


def create_provider(name: str) -> SolutionProvider:
    try:
        return PROVIDERS[name]()
    except KeyError:
        raise UnknownProviderError(f"Unknown solution provider: {name}") from None
