from fastapi import APIRouter
from app.models.analysis import AnalyzeRequest, AnalyzeResponse
from app.services.analyze import analyze_message, is_blocked

router = APIRouter(tags=["analyze"])

@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(body: AnalyzeRequest):
    analysis = analyze_message(body.content, body.scheduled_time)
    return AnalyzeResponse(**analysis.model_dump(exclude={"band"}), blocked=is_blocked(analysis))
