"""Services — dict-returning facades over generators."""
