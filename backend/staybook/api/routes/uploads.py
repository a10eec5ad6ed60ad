"""
Photo upload routes. Both return photo references (file names) to attach to places.
"""
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from typing import List, Optional
from staybook.models.user import User
from staybook.schemas.upload import UploadByLink
from staybook.core.exceptions import DownloadFailed, InvalidUpload
from staybook.services import upload_service
from staybook.api.dependencies import get_current_user

router = APIRouter(tags=["uploads"])


@router.post("/upload-by-link", response_model=str)
def upload_by_link(
    upload: UploadByLink,
    current_user: User = Depends(get_current_user)
):
    """Download a photo from a link."""
    try:
        return upload_service.download_image(upload.link)
    except InvalidUpload as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)
    except DownloadFailed as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.detail)


@router.post("/upload", response_model=List[str])
async def upload_photos(
    photos: Optional[List[UploadFile]] = File(None),
    current_user: User = Depends(get_current_user)
):
    """Upload photos from the client device."""
    try:
        return await upload_service.save_uploads(photos)
    except InvalidUpload as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)
