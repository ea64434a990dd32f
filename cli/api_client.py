"""REST API client for tango server."""

import requests


class TangoAPIClient:
    """Client for communicating with the tango REST API."""

    def __init__(self, base_url: str = "http://localhost:8000"):
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        response = self.session.get(f"{self.base_url}{endpoint}", params=params or {})
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        response = self.session.post(f"{self.base_url}{endpoint}", json=data or {})
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        return self._get("/")

    def get_status(self) -> dict:
        """Get rank, class and rolling accuracy."""
        return self._get("/api/status")

    def start_session(self, direction: str, mode: str, level: int = None) -> dict:
        """Start a session. Returns the first question."""
        data = {'direction': direction, 'mode': mode}
        if level is not None:
            data['level'] = level
        return self._post("/api/session/start", data)

    def submit_answer(self, answer: str) -> dict:
        """Answer the active question."""
        return self._post("/api/session/answer", {'answer': answer})

    def next_question(self) -> dict:
        """Advance. Returns {finished, question, result}."""
        return self._post("/api/session/next")

    def abandon_session(self) -> dict:
        return self._post("/api/session/abandon")

    def reset_profile(self) -> dict:
        """Clear rank and answer history."""
        return self._post("/api/profile/reset")
