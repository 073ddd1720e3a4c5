"""
CaptureLib - Capture sources, capture pipeline and camera session

This module turns a photo from a capture source into a recorded
original/filtered image pair and tracks the camera session state.
"""

from FC_Libs.CaptureLib.capture_sources import (
    CaptureSource,
    FileCaptureSource,
    DirectoryCaptureSource,
    MockCaptureSource,
)
from FC_Libs.CaptureLib.capture_pipeline import CapturePipeline
from FC_Libs.CaptureLib.camera_session import (
    CameraSession,
    SessionEvent,
    SessionState,
    EVENT_FILM_TYPE_CHANGED,
    EVENT_CAPTURE_STARTED,
    EVENT_CAPTURE_SUCCEEDED,
    EVENT_CAPTURE_FAILED,
)

__all__ = [
    "CaptureSource",
    "FileCaptureSource",
    "DirectoryCaptureSource",
    "MockCaptureSource",
    "CapturePipeline",
    "CameraSession",
    "SessionEvent",
    "SessionState",
    "EVENT_FILM_TYPE_CHANGED",
    "EVENT_CAPTURE_STARTED",
    "EVENT_CAPTURE_SUCCEEDED",
    "EVENT_CAPTURE_FAILED",
]
