# mindflow/routers/analysis.py
from fastapi import APIRouter, Depends, HTTPException

from mindflow.core.security import get_current_user
from mindflow.models.user import User
from mindflow.schemas.analysis import AnalyzeMoodIn
from mindflow.services.ai_gateway import (
    GatewayError,
    InvalidAnalysisRequest,
    MoodAnalyzer,
    get_analyzer,
)

router = APIRouter(tags=["analysis"])


@router.post("/analyze-mood")
def analyze_mood(
    body: AnalyzeMoodIn,
    user: User = Depends(get_current_user),
    analyzer: MoodAnalyzer = Depends(get_analyzer),
):
    """
    Forward a facial / journal / chat request to the AI gateway.

    The reply shape depends on analysisType; chat replies and unparseable
    answers come back as {"response": "..."}.
    """
    try:
        return analyzer.analyze(body.analysisType, body.imageBase64, body.userInput)
    except InvalidAnalysisRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GatewayError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
