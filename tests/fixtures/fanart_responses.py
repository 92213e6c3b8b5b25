"""
Mock fanart.tv API responses for testing.

Reproduit les irregularites de l'API reelle : compteurs en chaine ou en
nombre, chaines vides, saison "all", URL en http.
These fixtures are used with respx to mock httpx calls in tests.
"""

# GET /v3/movies/tt0137523
FANART_MOVIE_RESPONSE = {
    "name": "Fight Club",
    "tmdb_id": "550",
    "imdb_id": "tt0137523",
    "movieposter": [
        {
            "id": "2437",
            "url": "http://assets.fanart.tv/fanart/movies/550/movieposter/fight-club-5232b5d5a1d5b.jpg",
            "lang": "en",
            "likes": "7",
        },
        {
            "id": "74531",
            "url": "https://assets.fanart.tv/fanart/movies/550/movieposter/fight-club-5c6f2d6e1c3d4.jpg",
            "lang": "de",
            "likes": 3,
        },
    ],
    "moviedisc": [
        {
            "id": "1520",
            "url": "http://assets.fanart.tv/fanart/movies/550/moviedisc/fight-club-50ef42b3b5a3f.png",
            "lang": "en",
            "likes": "2",
            "disc": "1",
            "disc_type": "bluray",
        },
    ],
    "moviethumb": [
        {
            "id": "1",
            "url": "http://x/img.jpg",
            "lang": "",
            "likes": "12",
            "disc": "",
            "size": "500",
        },
    ],
}

# GET /v3/tv/75682
FANART_SERIES_RESPONSE = {
    "name": "Bones",
    "thetvdb_id": "75682",
    "seasonposter": [
        {"id": "7400", "url": "http://assets.fanart.tv/fanart/tv/75682/seasonposter/bones-1.jpg", "lang": "en", "likes": "4", "season": "1"},
        {"id": "7401", "url": "http://assets.fanart.tv/fanart/tv/75682/seasonposter/bones-all.jpg", "lang": "en", "likes": "1", "season": "all"},
        {"id": "7402", "url": "http://assets.fanart.tv/fanart/tv/75682/seasonposter/bones-0.jpg", "lang": "en", "likes": "0", "season": "0"},
    ],
    "tvbanner": [
        {"id": "1234", "url": "https://assets.fanart.tv/fanart/tv/75682/tvbanner/bones.jpg", "lang": "en", "likes": "9"},
    ],
}

# GET /v3/music/albums/9ba659df-5814-32f6-b95f-02b738698e7c
FANART_ALBUM_RESPONSE = {
    "name": "Metallica",
    "mbid_id": "65f4f0c5-ef9e-490c-aee3-909e7ae6b2ab",
    "albums": {
        "9ba659df-5814-32f6-b95f-02b738698e7c": {
            "albumcover": [
                {"id": "10001", "url": "http://assets.fanart.tv/fanart/music/cover.jpg", "likes": "5"},
            ],
            "cdart": [
                {"id": "10002", "url": "http://assets.fanart.tv/fanart/music/cd.png", "likes": "1", "disc": "1", "size": "1000"},
            ],
        },
    },
}

# GET /v3/music/labels/e832b688-546b-45e3-83e5-9f8db5dcde1d
FANART_LABEL_RESPONSE = {
    "name": "Warp Records",
    "id": "e832b688-546b-45e3-83e5-9f8db5dcde1d",
    "musiclabel": [
        {"id": "20001", "url": "http://assets.fanart.tv/fanart/music/labels/warp.png", "colour": "white", "likes": "0"},
    ],
}

# GET /v3/movies/latest
FANART_MOVIE_LATEST_RESPONSE = [
    {
        "tmdb_id": "550",
        "imdb_id": "tt0137523",
        "name": "Fight Club",
        "new_images": "2",
        "total_images": "41",
    },
    {
        "tmdb_id": "19995",
        "imdb_id": "",
        "name": "Avatar",
        "new_images": 1,
        "total_images": 120,
    },
]

# GET /v3/tv/latest
FANART_SERIES_LATEST_RESPONSE = [
    {
        "id": "75682",
        "name": "Bones",
        "new_images": "1",
        "total_images": "250",
    },
]
