import os
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from plagiarism_checker.checker import PlagiarismChecker, validate_threshold
from plagiarism_checker.models import Algorithm, CheckerConfig, InvalidArgumentError

DEFAULT_ALGORITHM = os.environ.get("PLAGIARISM_ALGORITHM", Algorithm.AVERAGE.value)
DEFAULT_THRESHOLD = os.environ.get("PLAGIARISM_THRESHOLD", "0.7")
DEFAULT_CASE_SENSITIVE = os.environ.get("PLAGIARISM_CASE_SENSITIVE", "false").lower() in {
    "1",
    "true",
    "yes",
}
DEFAULT_STOP_WORDS = os.environ.get("PLAGIARISM_STOP_WORDS")

checker: Optional[PlagiarismChecker] = None


class CheckRequest(BaseModel):
    text1: str
    text2: str
    algorithm: Optional[str] = None
    threshold: Optional[float] = None
    case_sensitive: Optional[bool] = None
    custom_stop_words: Optional[List[str]] = None


class DetailsRequest(BaseModel):
    text1: str
    text2: str


class CheckResponse(BaseModel):
    similarity_score: float
    algorithm: str
    is_plagiarized: bool


class DetailsResponse(BaseModel):
    scores: Dict[str, float]


def build_config() -> CheckerConfig:
    stop_words = None
    if DEFAULT_STOP_WORDS is not None:
        stop_words = frozenset(
            word.strip() for word in DEFAULT_STOP_WORDS.split(",") if word.strip()
        )
    try:
        algorithm = Algorithm(DEFAULT_ALGORITHM.lower())
    except ValueError:
        raise InvalidArgumentError(
            f"PLAGIARISM_ALGORITHM has unknown value {DEFAULT_ALGORITHM!r}",
            field="algorithm",
            value=DEFAULT_ALGORITHM,
        ) from None
    try:
        threshold = validate_threshold(float(DEFAULT_THRESHOLD))
    except ValueError as exc:
        raise InvalidArgumentError(
            f"PLAGIARISM_THRESHOLD must be a number within [0, 1], got {DEFAULT_THRESHOLD!r}",
            field="threshold",
            value=DEFAULT_THRESHOLD,
        ) from exc
    return CheckerConfig(
        algorithm=algorithm,
        threshold=threshold,
        case_sensitive=DEFAULT_CASE_SENSITIVE,
        stop_words=stop_words,
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    global checker
    if checker is None:
        checker = PlagiarismChecker(config=build_config())
    yield


app = FastAPI(title="Plagiarism Checker Service", lifespan=lifespan)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.post("/plagiarism/check", response_model=CheckResponse)
async def check(req: CheckRequest) -> CheckResponse:
    if checker is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    try:
        result = checker.check_plagiarism(
            req.text1,
            req.text2,
            algorithm=req.algorithm,
            threshold=req.threshold,
            case_sensitive=req.case_sensitive,
            custom_stop_words=req.custom_stop_words,
        )
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc
    return CheckResponse(**result.to_dict())


@app.post("/plagiarism/details", response_model=DetailsResponse)
async def details(req: DetailsRequest) -> DetailsResponse:
    if checker is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return DetailsResponse(scores=checker.get_detailed_results(req.text1, req.text2))
