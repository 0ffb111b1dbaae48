"""Camera and microphone capture.

Capture happens in the candidate's browser. The server keeps a model of the
granted stream so the session can toggle and stop its tracks and refuse to
start without them.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from jobportal.core.exceptions import PermissionDeniedError


class MediaTrack:
    """One capture track, ``video`` or ``audio``."""

    def __init__(self, kind: str):
        self.kind = kind
        self.enabled = True
        self.live = True

    def stop(self) -> None:
        self.live = False
        self.enabled = False


class MediaStream:
    """The tracks granted by a single permission request."""

    def __init__(self, tracks: List[MediaTrack]):
        self.tracks = tracks

    def video_tracks(self) -> List[MediaTrack]:
        return [track for track in self.tracks if track.kind == 'video']

    def audio_tracks(self) -> List[MediaTrack]:
        return [track for track in self.tracks if track.kind == 'audio']

    @property
    def active(self) -> bool:
        return any(track.live for track in self.tracks)

    def stop(self) -> None:
        for track in self.tracks:
            track.stop()


class MediaDevices(ABC):
    @abstractmethod
    def request(self, video: bool = True, audio: bool = True) -> MediaStream:
        """Ask for capture access.

        Raises:
            PermissionDeniedError: If access to any requested device is refused
        """


class ReportedMediaDevices(MediaDevices):
    """Devices whose permission outcome was reported by the browser."""

    def __init__(self, camera: bool, microphone: bool, reason: Optional[str] = None):
        self.camera = camera
        self.microphone = microphone
        self.reason = reason

    def request(self, video: bool = True, audio: bool = True) -> MediaStream:
        denied = []
        if video and not self.camera:
            denied.append('camera')
        if audio and not self.microphone:
            denied.append('microphone')
        if denied:
            detail = f": {self.reason}" if self.reason else ""
            raise PermissionDeniedError(f"Access to {' and '.join(denied)} was denied{detail}")

        tracks = []
        if video:
            tracks.append(MediaTrack('video'))
        if audio:
            tracks.append(MediaTrack('audio'))
        return MediaStream(tracks)
