"""
Async HTTP client for the portfolio site.

Used calls:
- GET  /contact-info/get, /experience/list, /projects/list,
  /projects/list-featured, /skills/list, /skills/list-featured
- POST /contact-submissions/create

Responses are parsed into the same pydantic models the API serves.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any

import httpx

from contact_info.schemas import ContactInfo
from contact_submissions.schemas import ContactSubmission
from experience.schemas import Experience
from projects.schemas import Project
from skills.schemas import Skill

logger = logging.getLogger(__name__)


class PortfolioClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def api_base_url() -> str:
    return os.environ.get("PORTFOLIO_API_URL", "http://localhost:8000").strip() or "http://localhost:8000"


@dataclass(frozen=True)
class PortfolioData:
    contact_info: ContactInfo | None
    experience: list[Experience]
    projects: list[Project]
    featured_projects: list[Project]
    skills: list[Skill]
    featured_skills: list[Skill]


class PortfolioClient:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or api_base_url()).rstrip("/")
        self.timeout_s = timeout_s
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout_s, transport=self.transport)

    async def _call(self, client: httpx.AsyncClient, method: str, path: str, payload: dict | None = None) -> Any:
        try:
            resp = await client.request(method, path, json=payload)
        except httpx.HTTPError as exc:
            logger.error("Portfolio API %s %s failed: %s", method, path, exc)
            raise PortfolioClientError(f"Failed to call {path}: {exc}") from exc

        if resp.status_code >= 400:
            # Avoid dumping huge bodies; include a small snippet.
            body = resp.text[:300]
            logger.error("Portfolio API %s %s returned %d: %s", method, path, resp.status_code, body)
            raise PortfolioClientError(
                f"{path} failed with status {resp.status_code}: {body}",
                status_code=resp.status_code,
            )
        return resp.json()

    async def load_portfolio(self) -> PortfolioData:
        """
        Fetch everything the portfolio page renders in one concurrent batch.
        """
        async with self._client() as client:
            (
                contact_info,
                experience,
                projects,
                featured_projects,
                skills,
                featured_skills,
            ) = await asyncio.gather(
                self._call(client, "GET", "/contact-info/get"),
                self._call(client, "GET", "/experience/list"),
                self._call(client, "GET", "/projects/list"),
                self._call(client, "GET", "/projects/list-featured"),
                self._call(client, "GET", "/skills/list"),
                self._call(client, "GET", "/skills/list-featured"),
            )

        return PortfolioData(
            contact_info=ContactInfo.model_validate(contact_info) if contact_info is not None else None,
            experience=[Experience.model_validate(item) for item in experience],
            projects=[Project.model_validate(item) for item in projects],
            featured_projects=[Project.model_validate(item) for item in featured_projects],
            skills=[Skill.model_validate(item) for item in skills],
            featured_skills=[Skill.model_validate(item) for item in featured_skills],
        )

    async def submit_contact(
        self,
        *,
        name: str,
        email: str,
        message: str,
        subject: str | None = None,
    ) -> ContactSubmission:
        payload = {"name": name, "email": email, "subject": subject, "message": message}
        async with self._client() as client:
            data = await self._call(client, "POST", "/contact-submissions/create", payload)
        return ContactSubmission.model_validate(data)
