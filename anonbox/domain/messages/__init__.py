# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import MESSAGE_MAX_LENGTH, Message, validate_message_text

__all__ = ["MESSAGE_MAX_LENGTH", "Message", "validate_message_text"]
