from fastapi import (
    APIRouter,
    Depends,
    Query,
    status
)
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import get_livecomment_db
from app.schemas.livecomment import (
    PostLivecommentRequest,
    Livecomment as LivecommentResponse,
    LivecommentReport as LivecommentReportResponse
)
from app.schemas.ng_word import (
    ModerateRequest,
    ModerateResponse,
    NGWord as NGWordResponse
)
from app.services.livecomment import get_livecomments, post_livecomment, parse_limit
from app.services.moderation import moderate
from app.services.ng_word import get_user_ng_words
from app.services.report import report_livecomment
from app.utils.token_utils import get_current_user_id

router = APIRouter(prefix="/livestream", tags=["livecomments"])


@router.get('/{livestream_id}/livecomment', response_model=list[LivecommentResponse], status_code=status.HTTP_200_OK)
async def get_livecomments_handler(
        livestream_id: int,
        limit: str | None = Query(None),
        user_id: int = Depends(get_current_user_id),
        db: AsyncSession = Depends(get_livecomment_db)):
    return await get_livecomments(db, livestream_id, parse_limit(limit))


@router.get('/{livestream_id}/ngwords', response_model=list[NGWordResponse], status_code=status.HTTP_200_OK)
async def get_ngwords_handler(
        livestream_id: int,
        user_id: int = Depends(get_current_user_id),
        db: AsyncSession = Depends(get_livecomment_db)):
    return await get_user_ng_words(db, user_id, livestream_id)


@router.post('/{livestream_id}/livecomment', response_model=LivecommentResponse, status_code=status.HTTP_201_CREATED)
async def post_livecomment_handler(
        livestream_id: int,
        request: PostLivecommentRequest,
        user_id: int = Depends(get_current_user_id),
        db: AsyncSession = Depends(get_livecomment_db)):
    return await post_livecomment(db, user_id, livestream_id, request.comment, request.tip)


@router.post(
    '/{livestream_id}/livecomment/{livecomment_id}/report',
    response_model=LivecommentReportResponse,
    status_code=status.HTTP_201_CREATED
)
async def report_livecomment_handler(
        livestream_id: int,
        livecomment_id: int,
        user_id: int = Depends(get_current_user_id),
        db: AsyncSession = Depends(get_livecomment_db)):
    return await report_livecomment(db, user_id, livestream_id, livecomment_id)


@router.post('/{livestream_id}/moderate', response_model=ModerateResponse, status_code=status.HTTP_201_CREATED)
async def moderate_handler(
        livestream_id: int,
        request: ModerateRequest,
        user_id: int = Depends(get_current_user_id),
        db: AsyncSession = Depends(get_livecomment_db)):
    word_id = await moderate(db, user_id, livestream_id, request.ng_word)
    return ModerateResponse(word_id=word_id)
