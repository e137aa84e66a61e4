# mindflow/client/api.py - HTTP client for the MindFlow backend
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from jose import jwt, JWTError

from mindflow.client.storage import LocalStore, TOKEN_KEY

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001"


class ApiError(Exception):
    """A failed backend call, with the message a notification would show."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase

    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, list):
        # pydantic validation errors: one line per field
        parts = []
        for err in detail:
            loc = ".".join(str(x) for x in err.get("loc", []) if x != "body")
            parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
        return "; ".join(parts)
    if detail:
        return str(detail)
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return resp.reason_phrase


class MindflowClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, store: Optional[LocalStore] = None,
                 http_client: Optional[httpx.Client] = None, timeout: float = 30.0):
        self.store = store or LocalStore()
        self.http = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    # ---- plumbing ----

    @property
    def token(self) -> Optional[str]:
        return self.store.get(TOKEN_KEY)

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            resp = self.http.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise ApiError(0, "Could not reach the server") from e

        if resp.status_code >= 400:
            raise ApiError(resp.status_code, _error_message(resp))
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # ---- auth ----

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.store.set(TOKEN_KEY, data["access_token"])
        return data["user"]

    def register(self, email: str, password: str, name: Optional[str] = None) -> Dict[str, Any]:
        payload = {"email": email, "password": password}
        if name:
            payload["name"] = name
        data = self._request("POST", "/auth/register", json=payload)
        self.store.set(TOKEN_KEY, data["access_token"])
        return data["user"]

    def sign_out(self) -> None:
        self.store.delete(TOKEN_KEY)

    def current_user(self) -> Optional[Dict[str, Any]]:
        """Identity read from the stored token, without contacting the server."""
        if not self.token:
            return None
        try:
            claims = jwt.get_unverified_claims(self.token)
        except JWTError:
            return None
        return {"id": claims.get("sub"), "email": claims.get("email")}

    # ---- moods ----

    def add_mood(self, mood: str, note: Optional[str] = None,
                 timestamp: Optional[datetime] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"mood": mood}
        if note:
            payload["note"] = note
        if timestamp:
            payload["timestamp"] = timestamp.isoformat()
        entry = self._request("POST", "/moods", json=payload)
        self.store.append_mood({"mood": entry["mood"], "note": entry.get("note"), "timestamp": entry["timestamp"]})
        return entry

    def moods(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/moods")

    def mood_report(self) -> Dict[str, Any]:
        return self._request("GET", "/moods/report")

    # ---- calendar ----

    def add_event(self, title: str, time: str, predicted_mood: str = "neutral",
                  tag: Optional[str] = None) -> Dict[str, Any]:
        payload = {"title": title, "time": time, "predictedMood": predicted_mood}
        if tag:
            payload["tag"] = tag
        return self._request("POST", "/events", json=payload)

    def events(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/events")

    def update_event(self, event_id: int, **changes) -> Dict[str, Any]:
        if "predicted_mood" in changes:
            changes["predictedMood"] = changes.pop("predicted_mood")
        return self._request("PUT", f"/events/{event_id}", json=changes)

    def delete_event(self, event_id: int) -> None:
        self._request("DELETE", f"/events/{event_id}")

    # ---- AI analysis ----

    def analyze(self, analysis_type: str, image_base64: Optional[str] = None,
                user_input: Optional[str] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"analysisType": analysis_type}
        if image_base64 is not None:
            payload["imageBase64"] = image_base64
        if user_input is not None:
            payload["userInput"] = user_input
        return self._request("POST", "/analyze-mood", json=payload)

    def analyze_face(self, image_base64: str) -> Dict[str, Any]:
        return self.analyze("facial", image_base64=image_base64)

    def analyze_journal(self, text: str) -> Dict[str, Any]:
        return self.analyze("journal", user_input=text)

    def chat(self, text: str) -> Dict[str, Any]:
        return self.analyze("chat", user_input=text)
