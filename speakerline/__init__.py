"""speakerline: submit audio to a diarization service and render speaker-attributed transcripts."""

__version__ = "0.1.0"
