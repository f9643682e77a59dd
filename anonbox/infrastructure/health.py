# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from dataclasses import dataclass

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from anonbox.infrastructure.db import ENGINE
from anonbox.shared.logging import logger


@dataclass(slots=True, frozen=True)
class DatabaseProbe:
    ok: bool
    latency_ms: float


def probe_database(engine: Engine = ENGINE) -> DatabaseProbe:
    started = time.perf_counter()
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.opt(exception=exc).error("health: database probe failed")
        return DatabaseProbe(ok=False, latency_ms=(time.perf_counter() - started) * 1000)
    return DatabaseProbe(ok=True, latency_ms=(time.perf_counter() - started) * 1000)


__all__ = ["DatabaseProbe", "probe_database"]
