"""
Firebase app initialisation and the async Firestore client.
"""

from __future__ import annotations

import logging

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore import AsyncClient

from ministry_backend.config import Settings

logger = logging.getLogger(__name__)


def get_firebase_app(settings: Settings) -> firebase_admin.App:
    """Return the default Firebase app, initialising it on first use."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    if not settings.firebase_configured:
        raise ValueError(
            "FIREBASE_PROJECT_ID, FIREBASE_PRIVATE_KEY and FIREBASE_CLIENT_EMAIL are required"
        )
    cred = credentials.Certificate(settings.firebase_credentials_info())
    app = firebase_admin.initialize_app(cred)
    logger.info("Initialised Firebase app for project %s", settings.firebase_project_id)
    return app


def create_firestore_client(settings: Settings) -> AsyncClient:
    return firestore_async.client(app=get_firebase_app(settings))
