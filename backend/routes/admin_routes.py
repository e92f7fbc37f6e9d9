import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from backend.auth.dependencies import get_storage, require_admin
from backend.models.user import User
from backend.schemas import (
    ArticleCreate,
    ArticleEnvelope,
    ArticleResponse,
    CivicAlertCreate,
    CivicAlertEnvelope,
    CivicAlertResponse,
    JobCreate,
    JobEnvelope,
    JobResponse,
)
from backend.storage import Storage

router = APIRouter(tags=['admin'])
logger = logging.getLogger(__name__)


@router.post('/articles', response_model=ArticleEnvelope, status_code=status.HTTP_201_CREATED)
def create_article(
    data: ArticleCreate,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    try:
        article = storage.create_article(data.model_dump())
    except SQLAlchemyError as exc:
        logger.exception('Failed to create article')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to create article',
        ) from exc

    logger.info('Admin %s published article %s', admin.id, article.id)
    return ArticleEnvelope(article=ArticleResponse.model_validate(article))


@router.post('/civic-alerts', response_model=CivicAlertEnvelope, status_code=status.HTTP_201_CREATED)
def create_civic_alert(
    data: CivicAlertCreate,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    try:
        alert = storage.create_civic_alert(data.model_dump())
    except SQLAlchemyError as exc:
        logger.exception('Failed to create civic alert')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to create civic alert',
        ) from exc

    logger.info('Admin %s published civic alert %s', admin.id, alert.id)
    return CivicAlertEnvelope(alert=CivicAlertResponse.model_validate(alert))


@router.post('/jobs', response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
def create_job(
    data: JobCreate,
    admin: User = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    try:
        job = storage.create_job(data.model_dump())
    except SQLAlchemyError as exc:
        logger.exception('Failed to create job')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to create job',
        ) from exc

    logger.info('Admin %s posted job %s', admin.id, job.id)
    return JobEnvelope(job=JobResponse.model_validate(job))
