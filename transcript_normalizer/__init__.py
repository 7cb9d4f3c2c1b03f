"""
Transcript normalizer package.

This package contains a small library and CLI tool that:
- validates raw meeting transcript text (length bounds, binary content),
- detects its format (WebVTT, SRT, Teams copy/paste text, plain text),
- rewrites it into normalized "Speaker: utterance" lines,
- extracts the names of the participants.
"""
