import asyncio

import pytest
from unittest.mock import patch

from dost.core.errors import ProblemValidationError, UnknownProviderError
from dost.services.providers import TemplateSolutionProvider, create_provider
from dost.services.solution_service import SolutionService


def test_template_solution_sections():
    content = TemplateSolutionProvider().solve("A block of mass 2kg").content

    assert content.startswith("**Problem:** A block of mass 2kg")
    for heading in ["**Understand the problem**", "**Identify known quantities**",
                    "**Choose appropriate formula**", "**Solve step-by-step**", "**Final Answer**"]:
        assert heading in content
    assert "   - Mass (m) is provided" in content
    assert "   - Velocity not specified" in content
    assert "\\[ F = ma \\]" in content


def test_create_provider():
    assert isinstance(create_provider("template"), TemplateSolutionProvider)
    with pytest.raises(UnknownProviderError):
        create_provider("deepseek")


def test_validate_problem():
    service = SolutionService(TemplateSolutionProvider(), delay_seconds=0)

    assert service.validate_problem("velocity") == "velocity"
    with pytest.raises(ProblemValidationError) as exc_info:
        service.validate_problem("")
    assert exc_info.value.status_code == 400
    with pytest.raises(ProblemValidationError):
        service.validate_problem(None)


def test_solve_waits_for_delay():
    service = SolutionService(TemplateSolutionProvider(), delay_seconds=1.5)

    with patch("dost.services.solution_service.asyncio.sleep") as mock_sleep:
        result = asyncio.run(service.solve("velocity"))

    mock_sleep.assert_awaited_once_with(1.5)
    assert "kinematics" in result.content


def test_solve_without_delay_skips_sleep():
    service = SolutionService(TemplateSolutionProvider(), delay_seconds=0)

    with patch("dost.services.solution_service.asyncio.sleep") as mock_sleep:
        asyncio.run(service.solve("velocity"))

    mock_sleep.assert_not_called()


def test_solve_classifies_topic_once():
    service = SolutionService(TemplateSolutionProvider(), delay_seconds=0)

    with patch("dost.services.providers.classify_topic", return_value="kinematics") as mock_classify:
        result = asyncio.run(service.solve("velocity"))

    mock_classify.assert_called_once_with("velocity")
    assert "kinematics" in result.content
