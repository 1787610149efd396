"""Response simulator for the skills mock API.

Executes an interpreted operation against the SkillStore and the badge engine
and wraps the result in a SimulatedResponse after an artificial delay, so
callers see the same status codes and latency a real server would give.

Mutations are persisted before the delay starts; a caller that stops waiting
still leaves the store updated.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional
from uuid import uuid4

from skillboard.badges import compute_badges
from skillboard.database.skill_store import SkillStore
from skillboard.error_handler import ErrorHandler
from skillboard.integrations.contracts.interfaces import Operation, OperationKind, SimulatedResponse
from skillboard.integrations.contracts.skills import NOT_FOUND_BODY, Skill, coerce_level, coerce_name

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 200


def _generate_skill_id() -> str:
    return str(uuid4())


class ResponseSimulator:
    """Answers mock API operations the way the real skills backend would."""

    def __init__(
        self,
        store: SkillStore,
        delay_ms: int = DEFAULT_DELAY_MS,
        id_factory: Callable[[], str] = _generate_skill_id,
        error_handler: Optional[ErrorHandler] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.store = store
        self.delay_ms = delay_ms
        self.id_factory = id_factory
        self.error_handler = error_handler or ErrorHandler()
        self._sleep = sleep
        self._handlers: Dict[OperationKind, Callable[[Operation], SimulatedResponse]] = {
            OperationKind.LIST_SKILLS: self._list_skills,
            OperationKind.CREATE_SKILL: self._create_skill,
            OperationKind.UPDATE_SKILL: self._update_skill,
            OperationKind.DELETE_SKILL: self._delete_skill,
            OperationKind.LIST_BADGES: self._list_badges,
        }

    async def handle(self, operation: Operation) -> SimulatedResponse:
        handler = self._handlers.get(operation.kind, self._not_found)
        try:
            response = handler(operation)
        except Exception as exc:
            payload = self.error_handler.handle_exception(
                exc,
                context={"operation": operation.kind.value, "path": operation.request.path},
            )
            response = SimulatedResponse.build(operation.request, payload, self.error_handler.status)
        await self._delay()
        return response

    async def _delay(self) -> None:
        if self.delay_ms > 0:
            await self._sleep(self.delay_ms / 1000)

    # --- Route handlers -------------------------------------------------------

    def _list_skills(self, operation: Operation) -> SimulatedResponse:
        skills = self.store.load()
        return SimulatedResponse.build(operation.request, [s.model_dump() for s in skills])

    def _create_skill(self, operation: Operation) -> SimulatedResponse:
        skills = self.store.load()
        body = operation.body
        item = Skill(
            id=self.id_factory(),
            name=coerce_name(body.get("name")),
            level=coerce_level(body.get("level")),
        )
        skills.append(item)
        self.store.save(skills)
        logger.info("Created skill %s (%s, level %s)", item.id, item.name, item.level)
        return SimulatedResponse.build(operation.request, item.model_dump(), 201)

    def _update_skill(self, operation: Operation) -> SimulatedResponse:
        skills = self.store.load()
        idx = next((i for i, s in enumerate(skills) if s.id == operation.skill_id), None)
        if idx is None:
            return self._not_found(operation)

        patch = operation.body
        updates: Dict[str, Any] = {}
        if "name" in patch:
            updates["name"] = coerce_name(patch["name"])
        if "level" in patch:
            updates["level"] = coerce_level(patch["level"])

        updated = skills[idx].model_copy(update=updates)
        skills[idx] = updated
        self.store.save(skills)
        logger.info("Updated skill %s: %s", updated.id, sorted(updates))
        return SimulatedResponse.build(operation.request, updated.model_dump())

    def _delete_skill(self, operation: Operation) -> SimulatedResponse:
        skills = self.store.load()
        remaining = [s for s in skills if s.id != operation.skill_id]
        if len(remaining) == len(skills):
            return self._not_found(operation)
        self.store.save(remaining)
        logger.info("Deleted skill %s", operation.skill_id)
        return SimulatedResponse.build(operation.request, None, 204)

    def _list_badges(self, operation: Operation) -> SimulatedResponse:
        badges = compute_badges(self.store.load())
        return SimulatedResponse.build(operation.request, [b.model_dump() for b in badges])

    def _not_found(self, operation: Operation) -> SimulatedResponse:
        logger.debug("No mock route for %s %s", operation.request.method, operation.request.path)
        return SimulatedResponse.build(operation.request, dict(NOT_FOUND_BODY), 404)
