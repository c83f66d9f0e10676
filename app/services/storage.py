"""
app/services/storage.py
Object storage for partner logos and membership profile pictures (S3)
"""
import logging

import boto3
from botocore.exceptions import ClientError
from fastapi import HTTPException, status

from app.config import settings

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/svg+xml": "svg",
}


def get_s3_client():
    return boto3.client(
        's3',
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
        region_name=settings.AWS_REGION,
        endpoint_url=f"https://s3.{settings.AWS_REGION}.amazonaws.com"
    )


def public_url(file_key: str) -> str:
    base = settings.STORAGE_PUBLIC_URL.rstrip("/")
    if not base:
        base = f"https://{settings.AWS_BUCKET_NAME}.s3.{settings.AWS_REGION}.amazonaws.com"
    return f"{base}/{file_key}"


def image_extension(content_type: str) -> str:
    """Validates the content type and returns the matching extension for the stored key."""
    if content_type not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unsupported file type. Use JPG, PNG, WEBP or SVG."
        )
    return ALLOWED_IMAGE_TYPES[content_type]


def upload(file_key: str, data: bytes, content_type: str) -> str:
    """Store ``data`` under ``file_key`` and return its public URL. One round trip, no retry."""
    try:
        get_s3_client().put_object(
            Bucket=settings.AWS_BUCKET_NAME,
            Key=file_key,
            Body=data,
            ContentType=content_type,
        )
    except ClientError as e:
        logger.error("Error uploading %s to storage: %s", file_key, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error uploading file: {str(e)}"
        )
    return public_url(file_key)
