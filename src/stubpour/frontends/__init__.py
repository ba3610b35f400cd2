# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Source front-ends for the stub generator."""

from stubpour.frontends.go import GoFrontend

__all__ = ["GoFrontend"]
