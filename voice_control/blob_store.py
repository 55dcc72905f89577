# voice_control/blob_store.py
import os

import requests
from google.api_core.exceptions import GoogleAPICallError
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

from logger_config import get_logger
from .errors import ArchivalFailed

logger = get_logger(__name__)


class GCSBlobStore:
    """Archives staged audio files to a Google Cloud Storage bucket."""

    def __init__(self, bucket_name: str, prefix: str = "audio-files",
                 credentials_path: str = "", timeout=None, client=None):
        self.bucket_name = bucket_name
        self.prefix = prefix
        self.credentials_path = credentials_path
        self.timeout = timeout
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if self.credentials_path:
                self._client = storage.Client.from_service_account_json(self.credentials_path)
            else:
                self._client = storage.Client()
        return self._client

    def destination(self, file_name: str) -> str:
        return f"{self.prefix}/{file_name}"

    def archive(self, path: str) -> str:
        """Upload ``path`` and return its ``gs://`` locator."""
        if not self.bucket_name:
            raise ArchivalFailed("BUCKET_NAME is not configured")

        destination = self.destination(os.path.basename(path))
        upload_kwargs = {} if self.timeout is None else {"timeout": self.timeout}
        try:
            blob = self.client.bucket(self.bucket_name).blob(destination)
            blob.upload_from_filename(path, **upload_kwargs)
        except (GoogleAPICallError, GoogleAuthError, requests.exceptions.RequestException, OSError) as e:
            logger.error(f"❌ Upload of {path} to {self.bucket_name} failed: {e}")
            raise ArchivalFailed(f"Could not archive audio to gs://{self.bucket_name}: {e}") from e

        logger.info(f"{path} uploaded to {self.bucket_name}")
        return f"gs://{self.bucket_name}/{destination}"
