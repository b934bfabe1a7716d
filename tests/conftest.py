import pytest

from plagiarism_checker.checker import PlagiarismChecker


@pytest.fixture
def checker() -> PlagiarismChecker:
    return PlagiarismChecker()
