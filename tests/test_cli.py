import json
from pathlib import Path

from click.testing import CliRunner

from openapi_gen.cli import _filter_endpoints, main
from openapi_gen.enrich.classifier import enrich_routes
from openapi_gen.models import RawRoute

FIXTURES = Path(__file__).parent / "fixtures"


def _make_routes(*pairs: tuple[str, str]):
    return enrich_routes([RawRoute(method=m, path=p) for m, p in pairs])


class TestCliGenerate:
    def test_generate_from_fixture(self, tmp_path):
        output = tmp_path / "docs" / "openapi.json"
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(FIXTURES / "routes.ts"), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Found 8 API endpoints." in result.output
        assert "Total endpoints: 8" in result.output
        assert "Categories: 5" in result.output

        doc = json.loads(output.read_text(encoding="utf-8"))
        assert [t["name"] for t in doc["tags"]] == [
            "Authentication",
            "Customers",
            "General",
            "Service Areas",
            "Widgets",
        ]
        post = doc["paths"]["/api/customers"]["post"]
        assert post["security"] == [{"cookieAuth": []}]
        assert post["operationId"] == "post__api_customers"
        login = doc["paths"]["/api/auth/login"]["post"]
        assert "security" not in login

    def test_generate_yaml(self, tmp_path):
        output = tmp_path / "openapi.yaml"
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(FIXTURES / "routes.ts"), "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").startswith("openapi: 3.0.0")

    def test_generate_empty_source(self, tmp_path):
        source = tmp_path / "routes.ts"
        source.write_text("export {};\n", encoding="utf-8")
        output = tmp_path / "openapi.json"

        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(source), "-o", str(output)])

        assert result.exit_code == 0
        doc = json.loads(output.read_text(encoding="utf-8"))
        assert doc["paths"] == {}
        assert doc["tags"] == []

    def test_missing_input(self, tmp_path):
        output = tmp_path / "openapi.json"
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(tmp_path / "nope.ts"), "-o", str(output)])
        assert result.exit_code == 1
        assert "Cannot read routes file" in result.output
        assert not output.exists()

    def test_output_write_failure(self, tmp_path):
        blocker = tmp_path / "docs"
        blocker.write_text("file", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(FIXTURES / "routes.ts"), "-o", str(blocker / "openapi.json")])
        assert result.exit_code == 1
        assert "Cannot write" in result.output

    def test_output_is_deterministic(self, tmp_path):
        runner = CliRunner()
        first = tmp_path / "a.json"
        second = tmp_path / "b.json"
        runner.invoke(main, ["generate", str(FIXTURES / "routes.ts"), "-o", str(first)])
        runner.invoke(main, ["generate", str(FIXTURES / "routes.ts"), "-o", str(second)])
        assert first.read_bytes() == second.read_bytes()

    def test_default_paths_from_env(self, tmp_path):
        output = tmp_path / "out.json"
        runner = CliRunner(env={
            "OPENAPI_GEN_ROUTES": str(FIXTURES / "routes.ts"),
            "OPENAPI_GEN_OUTPUT": str(output),
        })
        result = runner.invoke(main, ["generate"])
        assert result.exit_code == 0, result.output
        assert output.exists()


class TestCliCheck:
    def test_check_up_to_date(self, tmp_path):
        output = tmp_path / "openapi.json"
        runner = CliRunner()
        runner.invoke(main, ["generate", str(FIXTURES / "routes.ts"), "-o", str(output)])
        result = runner.invoke(main, ["generate", str(FIXTURES / "routes.ts"), "-o", str(output), "--check"])
        assert result.exit_code == 0
        assert "up to date" in result.output

    def test_check_out_of_date(self, tmp_path):
        output = tmp_path / "openapi.json"
        output.write_text("{}", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(FIXTURES / "routes.ts"), "-o", str(output), "--check"])
        assert result.exit_code == 1
        assert output.read_text(encoding="utf-8") == "{}"


class TestCliRoutes:
    def test_list_routes(self):
        runner = CliRunner()
        result = runner.invoke(main, ["routes", str(FIXTURES / "routes.ts")])
        assert result.exit_code == 0
        assert "8 of 8 endpoints." in result.output
        assert "[auth]" in result.output

    def test_list_routes_filtered(self):
        runner = CliRunner()
        result = runner.invoke(main, ["routes", str(FIXTURES / "routes.ts"), "--filter", "GET /api/customers*"])
        assert result.exit_code == 0
        assert "2 of 8 endpoints." in result.output


class TestFilterEndpoints:
    def test_filter_by_method_and_path(self):
        routes = _make_routes(("GET", "/pets"), ("POST", "/pets"), ("GET", "/users"))
        result = _filter_endpoints(routes, ("POST /pets",))
        assert len(result) == 1
        assert result[0].method == "POST"
        assert result[0].path == "/pets"

    def test_filter_by_path_only(self):
        routes = _make_routes(("GET", "/pets"), ("POST", "/pets/:id"), ("GET", "/users"))
        result = _filter_endpoints(routes, ("/pets/*",))
        assert len(result) == 1
        assert result[0].path == "/pets/:id"

    def test_no_filters_keeps_everything(self):
        routes = _make_routes(("GET", "/pets"))
        assert _filter_endpoints(routes, ()) == routes

    def test_filter_no_match(self):
        routes = _make_routes(("GET", "/pets"), ("POST", "/pets"))
        assert _filter_endpoints(routes, ("DELETE /orders",)) == []
