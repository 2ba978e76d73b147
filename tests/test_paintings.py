"""Tests for the painting routes against the bundled fixtures."""

from conftest import ids


def test_list_paintings_returns_whole_collection_in_source_order(client):
    response = client.get("/api/paintings")
    assert response.status_code == 200
    assert ids(response.json(), "paintingID") == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_painting_records_are_returned_verbatim(client):
    painting = client.get("/api/painting/1").json()
    assert painting["title"] == "The Milkmaid"
    assert painting["yearOfWork"] == 1658
    assert painting["medium"] == "Oil on canvas"
    assert painting["artist"]["lastName"] == "Vermeer"
    assert painting["gallery"]["galleryCity"] == "Amsterdam"
    first_color = painting["details"]["annotation"]["dominantColors"][0]
    assert first_color == {
        "color": {"red": 47, "green": 79, "blue": 79},
        "web": "#2F4F4F",
        "name": "Dark Slate Gray",
    }
    assert "painting_id" not in painting


def test_get_painting_by_id(client):
    response = client.get("/api/painting/7")
    assert response.status_code == 200
    assert response.json()["title"] == "Bridge over a Pond of Water Lilies"


def test_get_painting_unknown_id_returns_404(client):
    response = client.get("/api/painting/999")
    assert response.status_code == 404
    assert response.json() == {"message": "Painting with the id: 999 is not found"}


def test_get_painting_non_numeric_id_returns_400(client):
    response = client.get("/api/painting/abc")
    assert response.status_code == 400
    body = response.json()
    assert "painting_id" in body["message"]
    assert body["details"][0]["field"] == "path.painting_id"


def test_paintings_by_gallery(client):
    response = client.get("/api/painting/gallery/1")
    assert response.status_code == 200
    assert ids(response.json(), "paintingID") == [1, 2]


def test_paintings_by_unknown_gallery_returns_404(client):
    response = client.get("/api/painting/gallery/42")
    assert response.status_code == 404
    assert response.json()["message"] == "No paintings found for the gallery ID: 42"


def test_paintings_by_gallery_non_numeric_returns_400(client):
    assert client.get("/api/painting/gallery/louvre").status_code == 400


def test_paintings_by_artist(client):
    response = client.get("/api/painting/artist/1")
    assert response.status_code == 200
    assert ids(response.json(), "paintingID") == [3, 5, 8, 9]


def test_paintings_by_unknown_artist_returns_404(client):
    response = client.get("/api/painting/artist/77")
    assert response.status_code == 404
    assert response.json()["message"] == "No paintings found for the artist ID: 77"


def test_paintings_by_artist_non_numeric_returns_400(client):
    assert client.get("/api/painting/artist/monet").status_code == 400


def test_paintings_by_year_range(client):
    response = client.get("/api/painting/year/1880/1890")
    assert response.status_code == 200
    assert ids(response.json(), "paintingID") == [3, 5, 8, 9]


def test_year_range_bounds_are_inclusive(client):
    response = client.get("/api/painting/year/1642/1658")
    assert ids(response.json(), "paintingID") == [1, 2]


def test_single_year_range(client):
    response = client.get("/api/painting/year/1863/1863")
    assert ids(response.json(), "paintingID") == [6]


def test_empty_year_range_returns_404(client):
    response = client.get("/api/painting/year/1700/1800")
    assert response.status_code == 404
    assert response.json()["message"] == (
        "No paintings found within the given year range of min: 1700 and max: 1800"
    )


def test_signed_years_are_accepted(client):
    response = client.get("/api/painting/year/-500/+1700")
    assert response.status_code == 200
    assert ids(response.json(), "paintingID") == [1, 2]


def test_inverted_year_range_matches_nothing(client):
    assert client.get("/api/painting/year/1890/1880").status_code == 404


def test_non_numeric_year_returns_400(client):
    malformed = (
        "/api/painting/year/abc/1900",
        "/api/painting/year/1800/xyz",
        "/api/painting/year/1_880/1890",
        "/api/painting/year/%D9%A1%D9%A8%D9%A8%D9%A0/1890",
        "/api/painting/year/%201880/1890",
        "/api/painting/year/1880.5/1890",
    )
    for path in malformed:
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid min/max year format"}


def test_paintings_by_title_is_case_insensitive_substring(client):
    response = client.get("/api/painting/title/NIGHT")
    assert response.status_code == 200
    assert ids(response.json(), "paintingID") == [2, 5]


def test_paintings_by_title_no_match_returns_404(client):
    response = client.get("/api/painting/title/Mona Lisa")
    assert response.status_code == 404
    assert response.json()["message"] == "No paintings found with the provided title text: mona lisa"


def test_paintings_by_color(client):
    response = client.get("/api/painting/color/Goldenrod")
    assert response.status_code == 200
    assert ids(response.json(), "paintingID") == [2, 3, 4, 5]


def test_paintings_by_color_is_case_insensitive(client):
    response = client.get("/api/painting/color/dark olive GREEN")
    assert ids(response.json(), "paintingID") == [6, 7, 9]


def test_paintings_by_color_requires_full_name(client):
    response = client.get("/api/painting/color/Dark")
    assert response.status_code == 404
    assert response.json()["message"] == "No paintings found with the provided color name: dark"


def test_title_text_may_contain_a_slash(client):
    response = client.get("/api/painting/title/%2F")
    assert response.status_code == 404
    assert response.json()["message"] == "No paintings found with the provided title text: /"


def test_empty_title_text_matches_nothing(client):
    response = client.get("/api/painting/title/")
    assert response.status_code == 404
    assert response.json()["message"] == "No paintings found with the provided title text: "


def test_color_name_may_contain_a_slash(client):
    response = client.get("/api/painting/color/blue%2Fgreen")
    assert response.status_code == 404
    assert response.json()["message"] == "No paintings found with the provided color name: blue/green"
