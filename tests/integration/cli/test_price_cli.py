"""
Integration tests for price and db CLI commands.

Uses the real container and the in-memory test database.
"""
import json

import pytest

from prices.adapters.primary.cli.main import main
from prices.adapters.secondary.persistence.seed import seed_sample_prices


def run_cli(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.fixture
def seeded(price_repo):
    seed_sample_prices(price_repo)
    return price_repo


class TestPriceGetCommand:

    def test_prints_applicable_price(self, seeded, capsys):
        code = run_cli(['price', 'get', '--date', '2020-06-14T16:00:00',
                        '--product', '35455', '--brand', '1'])

        assert code == 0
        out = capsys.readouterr().out
        assert "Price list 2: 25.45" in out
        assert "2020-06-14T15:00:00 -> 2020-06-14T18:30:00" in out

    def test_json_output(self, seeded, capsys):
        code = run_cli(['price', 'get', '--date', '2020-06-15T10:00:00',
                        '--product', '35455', '--brand', '1', '--json'])

        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "productId": 35455,
            "brandId": 1,
            "priceList": 3,
            "startDate": "2020-06-15T00:00:00",
            "endDate": "2020-06-15T11:00:00",
            "finalPrice": "30.50",
        }

    def test_not_found_exits_with_one(self, seeded, capsys):
        code = run_cli(['price', 'get', '--date', '2019-01-01T10:00:00',
                        '--product', '35455', '--brand', '1'])

        assert code == 1
        assert "No price found for product 35455, brand 1 at 2019-01-01T10:00:00" in capsys.readouterr().out

    def test_missing_parameter_exits_with_two(self, seeded, capsys):
        code = run_cli(['price', 'get', '--date', '2020-06-14T10:00:00', '--brand', '1'])

        assert code == 2
        assert "Required parameter '--product' is missing" in capsys.readouterr().out

    def test_invalid_date_exits_with_two(self, seeded, capsys):
        code = run_cli(['price', 'get', '--date', 'invalid-date',
                        '--product', '35455', '--brand', '1'])

        assert code == 2
        assert "Invalid value 'invalid-date' for parameter '--date'" in capsys.readouterr().out

    def test_date_without_time_exits_with_two(self, seeded, capsys):
        code = run_cli(['price', 'get', '--date', '2020-06-14',
                        '--product', '35455', '--brand', '1'])

        assert code == 2
        assert "Invalid value '2020-06-14' for parameter '--date'" in capsys.readouterr().out

    def test_oversized_product_exits_with_two(self, seeded, capsys):
        product = '9' * 30

        code = run_cli(['price', 'get', '--date', '2020-06-14T16:00:00',
                        '--product', product, '--brand', '1'])

        assert code == 2
        out = capsys.readouterr().out
        assert f"Invalid value '{product}' for parameter '--product'. Expected type: positive int" in out


class TestDbCommands:

    def test_seed_loads_sample_prices(self, price_repo, capsys):
        code = run_cli(['db', 'seed'])

        assert code == 0
        assert price_repo.count() == 4
        assert "Seeded 4 price record(s)" in capsys.readouterr().out

    def test_seed_twice_does_not_duplicate(self, price_repo, capsys):
        run_cli(['db', 'seed'])
        code = run_cli(['db', 'seed'])

        assert code == 0
        assert price_repo.count() == 4
        assert "nothing seeded" in capsys.readouterr().out

    def test_seed_with_reset_reloads(self, price_repo):
        run_cli(['db', 'seed'])
        code = run_cli(['db', 'seed', '--reset'])

        assert code == 0
        assert price_repo.count() == 4

    def test_init_reports_schema(self, capsys):
        code = run_cli(['db', 'init'])

        assert code == 0
        assert "sqlite:///:memory:" in capsys.readouterr().out
