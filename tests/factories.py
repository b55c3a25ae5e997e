"""Shared response payload factories. Realistic Paris-based defaults, all overridable."""


def make_geocoding_result(**overrides: object) -> dict:
    defaults = {
        "place_id": "321895123",
        "licence": "https://locationiq.com/attribution",
        "osm_type": "relation",
        "osm_id": "7444",
        "boundingbox": ["48.8155755", "48.902156", "2.224122", "2.4697602"],
        "lat": "48.8566",
        "lon": "2.3522",
        "display_name": "Paris, Île-de-France, Metropolitan France, France",
        "class": "place",
        "type": "city",
        "importance": 0.9417,
    }
    return {**defaults, **overrides}


def make_autocomplete_result(**overrides: object) -> dict:
    defaults = {
        "place_id": "320119282",
        "osm_id": "5013364",
        "osm_type": "way",
        "lat": "48.8583701",
        "lon": "2.2944813",
        "display_name": "Eiffel Tower, Avenue Anatole France, Paris, France",
        "display_place": "Eiffel Tower",
        "display_address": "Avenue Anatole France, Paris, France",
        "address": {"name": "Eiffel Tower", "city": "Paris", "country": "France"},
    }
    return {**defaults, **overrides}


def make_route(**overrides: object) -> dict:
    defaults = {
        "distance": 4380.2,
        "duration": 612.5,
        "weight": 612.5,
        "weight_name": "routability",
        "geometry": {
            "type": "LineString",
            "coordinates": [[2.3522, 48.8566], [2.2945, 48.8584]],
        },
        "legs": [
            {
                "distance": 4380.2,
                "duration": 612.5,
                "weight": 612.5,
                "summary": "Quai Branly",
                "steps": [
                    {
                        "distance": 120.4,
                        "duration": 22.1,
                        "weight": 22.1,
                        "name": "Rue de Rivoli",
                        "maneuver": {
                            "location": [2.3522, 48.8566],
                            "bearing_before": 0,
                            "bearing_after": 254,
                            "type": "depart",
                        },
                    }
                ],
            }
        ],
    }
    return {**defaults, **overrides}


def make_matrix(**overrides: object) -> dict:
    defaults = {
        "code": "Ok",
        "durations": [[0.0, 612.5], [598.3, 0.0]],
        "distances": [[0.0, 4380.2], [4412.9, 0.0]],
        "sources": [
            {"name": "Rue de Rivoli", "hint": "abc", "location": [2.3522, 48.8566]},
            {"name": "Quai Branly", "hint": "def", "location": [2.2945, 48.8584]},
        ],
    }
    return {**defaults, **overrides}


def make_nearest(**overrides: object) -> dict:
    defaults = {
        "code": "Ok",
        "waypoints": [
            {"name": "Rue de Rivoli", "hint": "abc", "distance": 4.2, "location": [2.3522, 48.8566]}
        ],
    }
    return {**defaults, **overrides}


def make_timezone(**overrides: object) -> dict:
    defaults = {
        "timezone": {
            "name": "Europe/Paris",
            "now_in_dst": 0,
            "offset_sec": 3600,
            "short_name": "CET",
        },
    }
    return {**defaults, **overrides}


def make_nearby_poi(**overrides: object) -> dict:
    defaults = {
        "place_id": "331543203",
        "name": "Café de Flore",
        "display_name": "Café de Flore, 172, Boulevard Saint-Germain, Paris, France",
        "place_rank": 30,
        "lat": "48.8541",
        "lon": "2.3326",
        "osm_type": "node",
        "osm_id": "262373562",
        "class": "amenity",
        "type": "cafe",
        "distance": 84,
        "address": {"amenity": "Café de Flore", "city": "Paris", "country": "France"},
    }
    return {**defaults, **overrides}


def make_balance(**overrides: object) -> dict:
    defaults = {"status": "ok", "balance": {"day": 4867, "bonus": 0}}
    return {**defaults, **overrides}
