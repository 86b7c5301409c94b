"""
Workload Model Generation
=========================

Triggers the generation of a workload model from monitoring data, waits for
the frontend to finish it and stores the link to the generated model.
"""

import asyncio
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

import aiohttp

from experimentation.core.data import DataHolder
from experimentation.models.schemas import (
    TimeRange,
    WorkloadModelCreationRequest,
    WorkloadModelCreationResponse,
)
from .rest import HttpStatusError, RestAction


class UnexpectedResponseError(Exception):
    """The frontend returned a body of an unexpected shape."""

    pass


class WorkloadModelGeneration(RestAction):
    """
    Causes generation of a new workload model based on a data link and stores
    the link to the generated workload model in an output holder.

    The stored link can be used with the frontend as
    ``<frontend-url>/workloadmodel/get/<workload-link>``.

    Failures never propagate out of :meth:`execute`. Callers check
    ``broken_holder`` and ``workload_link`` instead.
    """

    def __init__(
        self,
        host: str,
        wm_type: str,
        tag: str,
        data_link: DataHolder[str],
        start_time: DataHolder[datetime],
        stop_time: DataHolder[datetime],
        workload_link: DataHolder[str],
        broken_holder: DataHolder[bool],
        port: str = "80",
        session: Optional[aiohttp.ClientSession] = None,
        wait_timeout: Optional[int] = None,
        max_wait_attempts: Optional[int] = None,
        poll_interval: Optional[float] = None,
    ):
        """
        Args:
            host: Hostname or IP of the ContinuITy frontend
            wm_type: Type of the workload model (e.g., wessbas)
            tag: Tag to be used for the workload model
            data_link: Input, link to retrieve the monitoring data from
            start_time: Input, optional begin of the monitoring data window
            stop_time: Input, optional end of the monitoring data window
            workload_link: Output, link to the generated workload model; must be writable
            broken_holder: Output, set to True if the run failed; must be writable
            port: Port of the ContinuITy frontend
            session: HTTP session to use; a default one is created if omitted

        Raises:
            ValueError: If an output holder is read-only
        """
        super().__init__(host, port, session)

        for holder in (workload_link, broken_holder):
            if holder.read_only:
                raise ValueError(f"Output data holder '{holder.name}' must be writable")

        self.wm_type = wm_type
        self.tag = tag
        self.data_link = data_link
        self.start_time = start_time
        self.stop_time = stop_time
        self.workload_link = workload_link
        self.broken_holder = broken_holder

        self.wait_timeout = (
            wait_timeout if wait_timeout is not None else self.settings.wait_timeout
        )
        self.max_wait_attempts = (
            max_wait_attempts if max_wait_attempts is not None else self.settings.max_wait_attempts
        )
        self.poll_interval = (
            poll_interval if poll_interval is not None else self.settings.poll_interval
        )

    @property
    def wait_request_timeout(self) -> float:
        """Client timeout of a wait request: the server-side wait plus the request timeout."""
        return self.wait_timeout / 1000 + self.settings.request_timeout

    def is_broken(self) -> bool:
        return self.broken_holder.is_set() and bool(self.broken_holder.get())

    def build_data_link(self) -> str:
        """Data link with the time range appended if both start and stop are set."""
        link = self.data_link.get()
        if self.start_time.is_set() and self.stop_time.is_set():
            time_range = TimeRange(start=self.start_time.get(), stop=self.stop_time.get())
            link += time_range.to_query()
        return link

    async def execute(self) -> None:
        try:
            request = WorkloadModelCreationRequest(data=self.build_data_link(), tag=self.tag)

            response = await self.post(
                f"/workloadmodel/{self.wm_type}/create",
                request.model_dump(),
                headers={"Content-Type": "application/json"},
            )
            if not isinstance(response, Mapping):
                raise UnexpectedResponseError(
                    f"Expected a JSON object from the create call, got {type(response).__name__}"
                )

            creation = WorkloadModelCreationResponse.model_validate(dict(response))

            if creation.link is None:
                self.logger.error(
                    "The response did not contain a link",
                    server_message=creation.message,
                )
                return

            self.logger.info(
                "Workload model creation initiated, waiting for creation to finish",
                server_message=creation.message,
                link=creation.link,
            )
            await self._wait_until_finished(creation.link)

            self.workload_link.set(creation.link)
        except HttpStatusError as e:
            self.logger.error(
                "Error response from server when creating or waiting for workload model",
                status=e.status,
                reason=e.reason,
                body=e.body,
                exc_info=True,
            )
            self.broken_holder.set(True)
        except Exception:
            self.logger.error(
                "Unknown error during workload model creation, aborting this run",
                exc_info=True,
            )
            self.broken_holder.set(True)

    async def _wait_until_finished(self, link: str) -> None:
        attempts = 0
        while True:
            if attempts >= self.max_wait_attempts:
                self.logger.error(
                    "Workload model still not finished, aborting the wait",
                    link=link,
                    attempts=attempts,
                )
                return

            wait_response = await self.get(
                f"/workloadmodel/wait/{link}?timeout={self.wait_timeout}",
                timeout=self.wait_request_timeout,
            )
            attempts += 1

            if self._is_finished(wait_response):
                self.logger.info("Workload model finished", link=link, attempts=attempts)
                return

            if self.poll_interval > 0:
                await asyncio.sleep(self.poll_interval)

    @staticmethod
    def _is_finished(wait_response: Any) -> bool:
        if wait_response is None:
            return False
        if not isinstance(wait_response, Mapping):
            raise UnexpectedResponseError(
                f"Expected a JSON object from the wait call, got {type(wait_response).__name__}"
            )
        return len(wait_response) > 0
