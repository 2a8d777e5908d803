"""Reader for SoundFont 2 files: RIFF chunks, hydra records, presets and instruments."""

__version__ = "0.1.0"