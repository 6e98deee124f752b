from destination_lookup.adapters.navigation import AddressBar, NullNavigator


def test_sets_destination_param():
    bar = AddressBar("http://localhost:3000/")

    bar.set_query_param("destination", "Paris")

    assert bar.url == "http://localhost:3000/?destination=Paris"
    assert bar.get_query_param("destination") == "Paris"


def test_replaces_previous_value_and_keeps_other_params():
    bar = AddressBar("http://localhost:3000/search?lang=en&destination=Paris#top")

    bar.set_query_param("destination", "New York")

    assert bar.url == "http://localhost:3000/search?lang=en&destination=New+York#top"
    assert bar.get_query_param("lang") == "en"
    assert bar.get_query_param("destination") == "New York"
    assert bar.history == ["http://localhost:3000/search?lang=en&destination=Paris#top"]


def test_on_change_callback():
    seen = []
    bar = AddressBar("http://localhost:3000/", on_change=seen.append)

    bar.set_query_param("destination", "Lyon")

    assert seen == ["http://localhost:3000/?destination=Lyon"]


def test_missing_param():
    assert AddressBar("http://localhost:3000/").get_query_param("destination") is None


def test_null_navigator_ignores_updates():
    NullNavigator().set_query_param("destination", "Paris")
