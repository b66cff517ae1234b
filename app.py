from __future__ import annotations
import logging
from typing import List, Optional
from contextlib import asynccontextmanager
from fastapi import FastAPI, UploadFile, File, Form, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

import config
from matching.batch import BatchAnalyzer
from matching.vocabulary import get_dictionary
from parsers.documents import read_document
from report import batch_stats, filter_records, to_csv
from schemas import BatchRequest, BatchResponse, ResumeIn, Verdict

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fail fast on a malformed vocabulary or settings before serving requests."""
    dictionary = get_dictionary()
    logger.info(
        f"[INFO] Vocabulary: {len(dictionary)} terms, workers: {config.max_workers()}, "
        f"fallback score: {config.fallback_score()}, batch timeout: {config.batch_timeout()}"
    )
    yield
    logger.info("[INFO] Application shutting down.")


app = FastAPI(title="Resume Fit Analyzer", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # restrict for prod
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_job_description(text: str) -> None:
    if not text or not text.strip():
        raise HTTPException(status_code=400, detail="job_description cannot be empty.")


def _run_batch(job_description: str, resumes: List[ResumeIn], verdict: Optional[Verdict], min_score: Optional[int]) -> BatchResponse:
    analyzer = BatchAnalyzer()
    records = analyzer.run(job_description, resumes)
    return BatchResponse(
        required_skills=list(analyzer.required_skills),
        records=filter_records(records, verdict=verdict, min_score=min_score),
        stats=batch_stats(records),
    )


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.get("/skills", response_model=dict)
def list_skills():
    """Known skill vocabulary grouped by category."""
    dictionary = get_dictionary()
    return dictionary.categorized(dictionary.terms())


@app.post("/analyze", response_model=BatchResponse)
def analyze(
    request: BatchRequest,
    verdict: Optional[Verdict] = None,
    min_score: Optional[int] = Query(None, ge=0, le=100),
):
    """Rank already-decoded resumes against a job description."""
    _require_job_description(request.job_description)
    return _run_batch(request.job_description, request.resumes, verdict, min_score)


@app.post("/analyze/upload", response_model=BatchResponse)
async def analyze_upload(
    job_description: str = Form(...),
    resumes: List[UploadFile] = File(...),
    verdict: Optional[Verdict] = None,
    min_score: Optional[int] = Query(None, ge=0, le=100),
):
    """Decode uploaded PDF / DOCX / TXT resumes, then rank them."""
    _require_job_description(job_description)

    decoded: List[ResumeIn] = []
    for upload in resumes:
        data = await upload.read()
        decoded.append(read_document(upload.filename or "", data))

    return await run_in_threadpool(_run_batch, job_description, decoded, verdict, min_score)


@app.post("/analyze/export")
def export_csv(request: BatchRequest):
    """Ranked results as a CSV attachment."""
    _require_job_description(request.job_description)
    records = BatchAnalyzer().run(request.job_description, request.resumes)
    return Response(
        content=to_csv(records),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="resume-analysis.csv"'},
    )
