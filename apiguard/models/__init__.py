"""
Pydantic models for the apiguard request validation layer.

Request envelopes for every supported endpoint plus the diagnostics returned
when a payload is rejected.
"""

from apiguard.models.diagnostics import *
from apiguard.models.files import *
from apiguard.models.images import *
from apiguard.models.responses import *
