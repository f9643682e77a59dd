# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from anonbox.shared.errors.base import ValidationError


class MessageTextRequiredError(ValidationError):
    def __init__(self) -> None:
        super().__init__("message_text_required", message="Message text is required")


class MessageTooLongError(ValidationError):
    def __init__(self, max_length: int) -> None:
        super().__init__(
            "message_too_long",
            context={"max_length": max_length},
            message=f"Message too long (max {max_length} chars)",
        )
