import io
import random
from datetime import date

from nftsim.app import App, main
from nftsim.market import Market
from nftsim.mathutil import int_div_ceil
from nftsim.models import MAX_ITEMS, SortStatus

TODAY = date(2025, 5, 18)


def _run(script, seed=3):
    out = io.StringIO()
    app = App(io.StringIO(script), out, random.Random(seed), TODAY)
    app.run()
    return app, out.getvalue()


def test_welcome_and_quit():
    app, output = _run("Bob\n0\n")
    assert app.user.name == "Bob"
    assert app.user.balance_eth == 10.0
    assert "Welcome, Bob!" in output
    assert output.endswith("Thanks for using our app!\n\n")


def test_rejects_long_and_empty_names():
    app, output = _run("ThisNameIsTooLong\n\nAlice\n0\n")
    assert output.count("That name is not permitted.") == 2
    assert app.user.name == "Alice"


def test_unknown_main_option():
    _, output = _run("Bob\n7\n0\n")
    assert "Option does not exist." in output


def test_input_end_stops_session():
    app, _ = _run("Bob\n")
    assert len(app.market.items) == MAX_ITEMS


def test_browse_first_and_last_page():
    app, output = _run("Bob\n1\n5\n0\n0\n")
    max_page = int_div_ceil(len(app.market.items), 15)
    assert f"PAGES 1/{max_page}" in output
    assert f"PAGES {max_page}/{max_page}" in output


def test_previous_page_stays_on_first():
    _, output = _run("Bob\n1\n3\n0\n0\n")
    assert "PAGES 0/" not in output
    assert output.count("PAGES 1/") == 2


def test_sort_descending_by_id():
    app, _ = _run("Bob\n1\n7\n0\n0\n")
    assert app.market.status is SortStatus.ID_DESC
    assert app.market.items[0].id == MAX_ITEMS


def test_menu_two_sort():
    app, _ = _run("Bob\n1\n9\n4\n0\n0\n")
    assert app.market.status is SortStatus.ROYALTY_ASC
    royalties = [n.royalty for n in app.market.items]
    assert royalties == sorted(royalties)


def test_search_by_id_shows_single_result():
    app, output = _run("Bob\n1\n9\n6\n5\n0\n0\n")
    assert "PAGES 1/1" in output
    assert app.market.find_id(5).name in output


def test_search_by_id_rejects_out_of_range_then_exits():
    _, output = _run("Bob\n1\n9\n6\n5000\n-1\n0\n0\n")
    assert "ID doesn't exist. Choose between 1-1000 or -1 to exit." in output
    assert "PAGES 1/1" not in output


def test_search_by_name():
    target = Market.generate(random.Random(3), TODAY).items[9].name
    _, output = _run(f"Bob\n1\n9\n7\n{target}.\n0\n0\n")
    assert "PAGES 1/1" in output
    assert target in output


def test_search_by_name_not_found():
    _, output = _run("Bob\n1\n9\n7\nNothing Here.\n0\n0\n")
    assert "Name not found." in output


def test_main_runs_with_seed(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Bob\n0\n"))
    assert main(["--seed", "1"]) == 0
    assert "Thanks for using our app!" in capsys.readouterr().out