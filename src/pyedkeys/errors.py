# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Exceptions raised by pyedkeys.
#
# Notes:
#	An unmatched key is never an error; lookups return an empty list.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations


class KeyBindingError(Exception):
	"""
	Base class for pyedkeys errors.
	"""


class ReentrantResolutionError(KeyBindingError, AssertionError):
	"""
	A resolution call started while another one was still in flight on the
	same translator or resolver. Callers must serialize calls per instance.
	"""
