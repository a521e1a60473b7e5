"""Mock responses for Instagram Graph API integration tests."""

from __future__ import annotations

PROFILE_RESPONSE = {
    "id": "17841400000000000",
    "username": "jane.doe",
    "account_type": "BUSINESS",
    "media_count": 4,
}

USER_MEDIA_RESPONSE = {
    "data": [
        {
            "id": "17900000000000004",
            "caption": "Morning run",
            "media_type": "IMAGE",
            "media_url": "https://scontent.cdninstagram.com/4.jpg",
            "permalink": "https://www.instagram.com/p/D4/",
            "timestamp": "2024-06-14T06:30:00+0000",
            "username": "jane.doe",
        },
        {
            "id": "17900000000000003",
            "media_type": "VIDEO",
            "media_url": "https://scontent.cdninstagram.com/3.mp4",
            "permalink": "https://www.instagram.com/p/D3/",
            "thumbnail_url": "https://scontent.cdninstagram.com/3.jpg",
            "timestamp": "2024-06-02T19:00:00+0000",
            "username": "jane.doe",
        },
        {
            "id": "17900000000000002",
            "caption": "Weekend trip to the coast",
            "media_type": "CAROUSEL_ALBUM",
            "media_url": "https://scontent.cdninstagram.com/2.jpg",
            "permalink": "https://www.instagram.com/p/D2/",
            "timestamp": "2024-05-18T11:15:00+0000",
            "username": "jane.doe",
        },
        {
            "id": "17900000000000001",
            "caption": "",
            "media_type": "IMAGE",
            "media_url": "https://scontent.cdninstagram.com/1.jpg",
            "permalink": "https://www.instagram.com/p/D1/",
            "timestamp": "2024-04-01T09:00:00+0000",
            "username": "jane.doe",
        },
    ],
    "paging": {
        "cursors": {"before": "QVFIUk", "after": "QVFIUl"},
    },
}

MEDIA_DETAILS_RESPONSE = {
    "id": "17900000000000002",
    "caption": "Weekend trip to the coast",
    "media_type": "CAROUSEL_ALBUM",
    "media_url": "https://scontent.cdninstagram.com/2.jpg",
    "permalink": "https://www.instagram.com/p/D2/",
    "timestamp": "2024-05-18T11:15:00+0000",
    "username": "jane.doe",
    "children": {
        "data": [
            {
                "id": "17900000000000021",
                "media_type": "IMAGE",
                "media_url": "https://scontent.cdninstagram.com/21.jpg",
            },
            {
                "id": "17900000000000022",
                "media_type": "VIDEO",
                "media_url": "https://scontent.cdninstagram.com/22.mp4",
                "thumbnail_url": "https://scontent.cdninstagram.com/22.jpg",
            },
        ]
    },
}

REFRESH_TOKEN_RESPONSE = {
    "access_token": "IGQVJ-refreshed",
    "token_type": "bearer",
    "expires_in": 5183944,
}

TOKEN_INFO_RESPONSE = {
    "app_id": "123456789",
    "application": "Demo App",
    "expires_in": 2592000,
}

INVALID_TOKEN_ERROR_RESPONSE = {
    "error": {
        "message": "Error validating access token: Session has expired.",
        "type": "OAuthException",
        "code": 190,
        "fbtrace_id": "AbCdEf",
    }
}

RATE_LIMIT_ERROR_RESPONSE = {
    "error": {
        "message": "Application request limit reached",
        "type": "OAuthException",
        "code": 4,
    }
}
