# spotiflac_models/models/miscellaneous.py
"""
Supporting objects that are not addressable resources on their own:
restrictions and the pieces of a track's audio analysis.
"""
from typing import Optional, Tuple

from pydantic import StrictFloat, StrictInt, StrictStr

from spotiflac_models.models.base import AbstractModelObject
from spotiflac_models.models.enums import ModalityValue


class Restrictions(AbstractModelObject):
    reason: Optional[StrictStr] = None


class AudioAnalysisMeta(AbstractModelObject):
    """Bookkeeping about the analyzer run that produced an analysis."""
    analyzer_version: Optional[StrictStr] = None
    platform: Optional[StrictStr] = None
    detailed_status: Optional[StrictStr] = None
    status_code: Optional[StrictInt] = None
    timestamp: Optional[StrictInt] = None
    analysis_time: Optional[StrictFloat] = None
    input_process: Optional[StrictStr] = None


class AudioAnalysisMeasure(AbstractModelObject):
    """One bar, beat or tatum; times are in seconds."""
    start: Optional[StrictFloat] = None
    duration: Optional[StrictFloat] = None
    confidence: Optional[StrictFloat] = None


class AudioAnalysisSection(AbstractModelObject):
    start: Optional[StrictFloat] = None
    duration: Optional[StrictFloat] = None
    confidence: Optional[StrictFloat] = None
    loudness: Optional[StrictFloat] = None
    tempo: Optional[StrictFloat] = None
    tempo_confidence: Optional[StrictFloat] = None
    key: Optional[StrictInt] = None
    key_confidence: Optional[StrictFloat] = None
    mode: Optional[ModalityValue] = None
    mode_confidence: Optional[StrictFloat] = None
    time_signature: Optional[StrictInt] = None
    time_signature_confidence: Optional[StrictFloat] = None


class AudioAnalysisSegment(AbstractModelObject):
    start: Optional[StrictFloat] = None
    duration: Optional[StrictFloat] = None
    confidence: Optional[StrictFloat] = None
    loudness_start: Optional[StrictFloat] = None
    loudness_max_time: Optional[StrictFloat] = None
    loudness_max: Optional[StrictFloat] = None
    loudness_end: Optional[StrictFloat] = None
    pitches: Optional[Tuple[StrictFloat, ...]] = None
    timbre: Optional[Tuple[StrictFloat, ...]] = None


class AudioAnalysisTrack(AbstractModelObject):
    num_samples: Optional[StrictInt] = None
    duration: Optional[StrictFloat] = None
    sample_md5: Optional[StrictStr] = None
    offset_seconds: Optional[StrictInt] = None
    window_seconds: Optional[StrictInt] = None
    analysis_sample_rate: Optional[StrictInt] = None
    analysis_channels: Optional[StrictInt] = None
    end_of_fade_in: Optional[StrictFloat] = None
    start_of_fade_out: Optional[StrictFloat] = None
    loudness: Optional[StrictFloat] = None
    tempo: Optional[StrictFloat] = None
    tempo_confidence: Optional[StrictFloat] = None
    time_signature: Optional[StrictInt] = None
    time_signature_confidence: Optional[StrictFloat] = None
    key: Optional[StrictInt] = None
    key_confidence: Optional[StrictFloat] = None
    mode: Optional[ModalityValue] = None
    mode_confidence: Optional[StrictFloat] = None
    codestring: Optional[StrictStr] = None
    code_version: Optional[StrictFloat] = None
    echoprintstring: Optional[StrictStr] = None
    echoprint_version: Optional[StrictFloat] = None
    synchstring: Optional[StrictStr] = None
    synch_version: Optional[StrictFloat] = None
    rhythmstring: Optional[StrictStr] = None
    rhythm_version: Optional[StrictFloat] = None


class AudioAnalysis(AbstractModelObject):
    """Full low-level analysis of a track (``/audio-analysis/{id}``)."""
    bars: Optional[Tuple[AudioAnalysisMeasure, ...]] = None
    beats: Optional[Tuple[AudioAnalysisMeasure, ...]] = None
    meta: Optional[AudioAnalysisMeta] = None
    sections: Optional[Tuple[AudioAnalysisSection, ...]] = None
    segments: Optional[Tuple[AudioAnalysisSegment, ...]] = None
    tatums: Optional[Tuple[AudioAnalysisMeasure, ...]] = None
    track: Optional[AudioAnalysisTrack] = None
