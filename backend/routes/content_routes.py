import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

from backend.auth.dependencies import get_storage
from backend.schemas import (
    ArticleEnvelope,
    ArticleListResponse,
    ArticleResponse,
    CivicAlertListResponse,
    CivicAlertResponse,
    JobListResponse,
    JobResponse,
)
from backend.storage import DEFAULT_LIMIT, Storage

router = APIRouter(tags=['content'])
logger = logging.getLogger(__name__)

# Largest value a SQL INTEGER bind parameter accepts.
MAX_QUERY_INTEGER = 2**63 - 1


def parse_limit(raw_value: str | None) -> int:
    try:
        limit = int(raw_value)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    return min(limit, MAX_QUERY_INTEGER) if limit > 0 else DEFAULT_LIMIT


def parse_offset(raw_value: str | None) -> int:
    try:
        offset = int(raw_value)
    except (TypeError, ValueError):
        return 0
    return min(max(offset, 0), MAX_QUERY_INTEGER)


@router.get('/articles', response_model=ArticleListResponse)
def list_articles(
    limit: str | None = Query(default=None),
    offset: str | None = Query(default=None),
    category: str | None = Query(default=None),
    storage: Storage = Depends(get_storage),
):
    try:
        articles = storage.get_articles(parse_limit(limit), parse_offset(offset), category or None)
    except SQLAlchemyError as exc:
        logger.exception('Failed to fetch articles')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch articles',
        ) from exc

    return ArticleListResponse(articles=[ArticleResponse.model_validate(article) for article in articles])


@router.get('/articles/{article_id}', response_model=ArticleEnvelope)
def get_article(article_id: str, storage: Storage = Depends(get_storage)):
    try:
        article = storage.get_article(article_id)
    except SQLAlchemyError as exc:
        logger.exception('Failed to fetch article %s', article_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch article',
        ) from exc

    if article is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Article not found')

    return ArticleEnvelope(article=ArticleResponse.model_validate(article))


@router.get('/civic-alerts', response_model=CivicAlertListResponse)
def list_civic_alerts(
    limit: str | None = Query(default=None),
    storage: Storage = Depends(get_storage),
):
    try:
        alerts = storage.get_civic_alerts(parse_limit(limit))
    except SQLAlchemyError as exc:
        logger.exception('Failed to fetch civic alerts')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch civic alerts',
        ) from exc

    return CivicAlertListResponse(alerts=[CivicAlertResponse.model_validate(alert) for alert in alerts])


@router.get('/jobs', response_model=JobListResponse)
def list_jobs(
    limit: str | None = Query(default=None),
    job_type: str | None = Query(default=None, alias='type'),
    storage: Storage = Depends(get_storage),
):
    try:
        jobs = storage.get_jobs(parse_limit(limit), job_type or None)
    except SQLAlchemyError as exc:
        logger.exception('Failed to fetch jobs')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch jobs',
        ) from exc

    return JobListResponse(jobs=[JobResponse.model_validate(job) for job in jobs])
