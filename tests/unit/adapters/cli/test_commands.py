"""
Tests pour les commandes CLI (Typer CliRunner).

Les commandes s'executent sur une vraie base SQLite dans tmp_path ;
seuls le client HTTP et le lecteur sont mockes.
"""

from unittest.mock import AsyncMock, patch

import pytest
from dependency_injector import providers
from sqlmodel import Session
from typer.testing import CliRunner

from cinelib.container import Container
from cinelib.core.ports.page_fetcher import FetchError
from cinelib.infrastructure.persistence.database import SchemaState, build_engine
from cinelib.services.importer import ImportService
from tests.fixtures.movie_pages import INCEPTION_PAGE, PERCENT_RATING_PAGE

runner = CliRunner()

COMMAND_MODULES = (
    "cinelib.adapters.cli.commands.catalog_commands",
    "cinelib.adapters.cli.commands.import_commands",
    "cinelib.adapters.cli.commands.movie_commands",
)


@pytest.fixture
def cli_container(test_settings):
    """
    Container de test : base SQLite dans tmp_path, client HTTP mocke.

    Chaque module de commandes recoit ce container a la place de Container().
    """
    engine = build_engine(test_settings.database_url)
    state = SchemaState(engine)
    state.ensure_initialized()

    container = Container()
    container.config.override(providers.Object(test_settings))
    container.database.override(providers.Resource(state.ensure_initialized))
    container.session.override(providers.Factory(Session, engine))

    fetcher = AsyncMock()
    fetcher.fetch.return_value = INCEPTION_PAGE
    container.page_fetcher.override(providers.Object(fetcher))

    patchers = [patch(f"{module}.Container", return_value=container) for module in COMMAND_MODULES]
    for patcher in patchers:
        patcher.start()
    yield container
    for patcher in patchers:
        patcher.stop()
    engine.dispose()


@pytest.fixture
def app():
    from cinelib.main import app

    return app


def add_movie(container, title: str, rating: int, file_path) -> int:
    service: ImportService = container.import_service()
    return service.add_manual(file_path, title=title, personal_rating=rating).id


class TestListCommand:
    def test_empty_catalog(self, app, cli_container) -> None:
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "No movie matches." in result.output

    def test_list_shows_stale_warning(self, app, cli_container, movie_file) -> None:
        add_movie(cli_container, "Forgettable", 2, movie_file)

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Forgettable" in result.output
        assert "Suggested Deletions" in result.output

    def test_list_filters(self, app, cli_container, movie_file) -> None:
        add_movie(cli_container, "Heat", 9, movie_file)
        add_movie(cli_container, "Ronin", 8, movie_file)

        result = runner.invoke(app, ["list", "--search", "heat", "--no-stale-check"])

        assert result.exit_code == 0
        assert "Heat" in result.output
        assert "Ronin" not in result.output


class TestAddAndScrape:
    def test_add_manual(self, app, cli_container, movie_file) -> None:
        result = runner.invoke(app, ["add", str(movie_file), "--title", "Heat", "--rating", "8"])

        assert result.exit_code == 0
        movies = cli_container.catalog_service().list_movies()
        assert [(m.title, m.personal_rating) for m in movies] == [("Heat", 8)]

    def test_add_missing_file(self, app, cli_container, tmp_path) -> None:
        result = runner.invoke(app, ["add", str(tmp_path / "missing.mkv")])
        assert result.exit_code == 1
        assert "No File" in result.output

    def test_add_unsupported_extension(self, app, cli_container, tmp_path) -> None:
        subtitle = tmp_path / "movie.srt"
        subtitle.write_text("1")
        result = runner.invoke(app, ["add", str(subtitle)])
        assert result.exit_code == 1
        assert "File Error" in result.output

    def test_add_invalid_rating(self, app, cli_container, movie_file) -> None:
        result = runner.invoke(app, ["add", str(movie_file), "--rating", "12"])
        assert result.exit_code == 1
        assert "Invalid Rating" in result.output

    def test_scrape_links_known_genres(self, app, cli_container, movie_file) -> None:
        result = runner.invoke(
            app, ["scrape", "https://www.imdb.com/title/tt1375666/", str(movie_file)]
        )

        assert result.exit_code == 0, result.output
        assert "Added 'Inception' with rating 8.8 [Action, Sci-Fi]" in result.output
        movie = cli_container.catalog_service().list_movies()[0]
        assert movie.title == "Inception"
        assert movie.imdb_rating == 8.8
        assert movie.categories == ["Action"]

    def test_scrape_fetch_failure(self, app, cli_container, movie_file) -> None:
        cli_container.page_fetcher().fetch.side_effect = FetchError("https://x", "timeout")

        result = runner.invoke(app, ["scrape", "https://x", str(movie_file)])

        assert result.exit_code == 1
        assert "Scraping Error" in result.output
        assert cli_container.catalog_service().list_movies() == []

    def test_scrape_rating_on_another_scale(self, app, cli_container, movie_file) -> None:
        cli_container.page_fetcher().fetch.return_value = PERCENT_RATING_PAGE

        result = runner.invoke(app, ["scrape", "https://x", str(movie_file)])

        assert result.exit_code == 0, result.output
        movie = cli_container.catalog_service().list_movies()[0]
        assert movie.title == "Parasite"
        assert movie.imdb_rating == 0.0
        assert movie.categories == ["Drama"]


class TestEditCommands:
    def test_rate(self, app, cli_container, movie_file) -> None:
        movie_id = add_movie(cli_container, "Heat", 5, movie_file)

        result = runner.invoke(app, ["rate", str(movie_id), "9"])

        assert result.exit_code == 0
        assert cli_container.catalog_service().get_movie(movie_id).personal_rating == 9

    def test_rate_out_of_range(self, app, cli_container, movie_file) -> None:
        movie_id = add_movie(cli_container, "Heat", 5, movie_file)
        result = runner.invoke(app, ["rate", str(movie_id), "11"])
        assert result.exit_code == 1
        assert "Invalid Rating" in result.output

    def test_edit_adds_category(self, app, cli_container, movie_file) -> None:
        movie_id = add_movie(cli_container, "Heat", 5, movie_file)

        result = runner.invoke(
            app, ["edit", str(movie_id), "--title", "Heat (1995)", "--category", "crime"]
        )

        assert result.exit_code == 0
        movie = cli_container.catalog_service().get_movie(movie_id)
        assert movie.title == "Heat (1995)"
        assert movie.categories == ["Crime"]

    def test_edit_unknown_movie(self, app, cli_container) -> None:
        result = runner.invoke(app, ["edit", "99", "--title", "x"])
        assert result.exit_code == 1
        assert "No selection" in result.output

    def test_delete_with_confirmation(self, app, cli_container, movie_file) -> None:
        movie_id = add_movie(cli_container, "Heat", 5, movie_file)

        result = runner.invoke(app, ["delete", str(movie_id)], input="y\n")

        assert result.exit_code == 0
        assert cli_container.catalog_service().list_movies() == []

    def test_delete_cancelled(self, app, cli_container, movie_file) -> None:
        movie_id = add_movie(cli_container, "Heat", 5, movie_file)

        result = runner.invoke(app, ["delete", str(movie_id)], input="n\n")

        assert result.exit_code == 0
        assert len(cli_container.catalog_service().list_movies()) == 1

    def test_play_records_last_view(self, app, cli_container, movie_file) -> None:
        movie_id = add_movie(cli_container, "Heat", 5, movie_file)

        with patch("cinelib.adapters.cli.commands.movie_commands.launch_player") as mock_launch:
            result = runner.invoke(app, ["play", str(movie_id)])

        assert result.exit_code == 0
        mock_launch.assert_called_once()
        assert cli_container.catalog_service().get_movie(movie_id).last_view is not None


class TestInfoCommands:
    def test_version(self, app) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "CineLib v" in result.output
