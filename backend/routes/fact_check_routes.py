import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from backend.auth.dependencies import get_current_user, get_storage
from backend.models.user import User
from backend.schemas import FactCheckEnvelope, FactCheckListResponse, FactCheckRequest, FactCheckResponse
from backend.services.fact_checker import classify
from backend.storage import Storage, UserNotFoundError

router = APIRouter(tags=['fact-checks'])
logger = logging.getLogger(__name__)


@router.post('/fact-check', response_model=FactCheckEnvelope)
def create_fact_check(
    data: FactCheckRequest,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    verdict = classify(data.text)

    try:
        fact_check = storage.create_fact_check(
            {
                'user_id': current_user.id,
                'text': data.text,
                'result': verdict.result,
                'confidence': verdict.confidence,
                'explanation': verdict.explanation,
                'sources': None,
            }
        )
        storage.update_user(current_user.id, {'facts_checked': (current_user.facts_checked or 0) + 1})
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='User not found') from exc
    except SQLAlchemyError as exc:
        logger.exception('Failed to perform fact check for user %s', current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to perform fact check',
        ) from exc

    return FactCheckEnvelope(fact_check=FactCheckResponse.model_validate(fact_check))


@router.get('/fact-checks', response_model=FactCheckListResponse)
def list_fact_checks(
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    try:
        fact_checks = storage.get_fact_checks_by_user(current_user.id)
    except SQLAlchemyError as exc:
        logger.exception('Failed to fetch fact checks for user %s', current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch fact checks',
        ) from exc

    return FactCheckListResponse(
        fact_checks=[FactCheckResponse.model_validate(fact_check) for fact_check in fact_checks]
    )
