from .oauth import decode_launch_code, get_access_token, get_code_from_url, is_launch_claims, origin_of

__all__ = [
    "decode_launch_code",
    "get_access_token",
    "get_code_from_url",
    "is_launch_claims",
    "origin_of",
]
