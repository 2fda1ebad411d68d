import hashlib

from fastapi import FastAPI, HTTPException
from .errors import ReformatError
from .models import EnginesResponse, HealthResponse, ReformatReport, ReformatRequest, ReformatResponse
from .reformat import Reformatter
from .template import available_template_engines

app = FastAPI(
    title="csv-reformatter",
    description="Deterministic templated reformatting of comma-separated records",
    version="0.1.0",
)


def _sha256_hex(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/engines", response_model=EnginesResponse)
def engines():
    return {"engines": available_template_engines()}


@app.post("/reformat", response_model=ReformatResponse)
def reformat(request: ReformatRequest):
    try:
        reformatter = Reformatter(request)
        rows = reformatter.reformat_rows(request.input)
        output = reformatter.render(rows)
    except ReformatError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ReformatResponse(
        output=output,
        report=ReformatReport(
            rows=len(rows),
            columns=len(reformatter.input_columns),
            sorted_by=reformatter.sort_by,
            header=reformatter.header,
            sha256=_sha256_hex(output),
        ),
    )
