from node_discover.infra.http import Auth, BearerAuth, HttpClient, HttpError, Response

__all__ = ["Auth", "BearerAuth", "HttpClient", "HttpError", "Response"]
