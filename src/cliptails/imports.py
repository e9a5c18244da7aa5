"""
Core imports for the cliptails library.

This module centralizes imports from third-party libraries used by the
configuration layer, keeping the settings modules consistent.
"""

import os  # noqa: F401
import re  # noqa: F401
import json  # noqa: F401

from pydantic_settings import (  # noqa: F401
    BaseSettings,
    NoDecode,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)
from pydantic import (  # noqa: F401
    Field,
    BaseModel,
    field_validator,
)

from typing import Annotated, Any, List, Optional, Literal  # noqa: F401

from pathlib import Path  # noqa: F401
