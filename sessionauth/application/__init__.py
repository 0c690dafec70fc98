# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_flow import AuthFlow

__all__ = ["AuthFlow"]
