"""
API path helpers.
"""


def auth_path(mount: str, *parts: str) -> str:
    """
    Build the path of an auth backend endpoint.

    >>> auth_path("/aws/", "login")
    'auth/aws/login'
    """
    segments = [mount.strip('/')] + [part.strip('/') for part in parts]
    return "auth/" + "/".join(segment for segment in segments if segment)
