from fastapi import APIRouter, HTTPException
from app.models.analysis import ApplyRequest, RewriteRequest, RewriteResponse
from app.services.analyze import analyze_message, is_blocked, rewrite
from app.services.rewrite import apply_suggestion

router = APIRouter(tags=["rewrite"])

@router.post("/rewrite", response_model=RewriteResponse)
def rewrite_message(body: RewriteRequest):
    suggestions = body.suggestions
    if suggestions is None:
        # no explicit list: analyse and apply everything the engine proposes
        analysis = analyze_message(body.content, body.scheduled_time)
        if is_blocked(analysis):
            raise HTTPException(status_code=422, detail="Message is blocked and must be rewritten by its author")
        suggestions = list(analysis.suggestions)
    return RewriteResponse(content=rewrite(body.content, suggestions))

@router.post("/rewrite/apply", response_model=RewriteResponse)
def apply_one(body: ApplyRequest):
    return RewriteResponse(content=apply_suggestion(body.content, body.suggestion))
