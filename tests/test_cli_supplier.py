"""Tests for supplier, purchase, supplier payment and report commands."""

from ermay.cli.main import cli

from builders import OWNER


def test_supplier_create_and_list(cli_runner, cli_args):
    result = cli_runner.invoke(
        cli, cli_args + ["supplier", "create", "Global Parts", "--city", "Bursa", "--sector", "Otomotiv"]
    )
    assert result.exit_code == 0
    assert "Created supplier 'Global Parts'" in result.output

    result = cli_runner.invoke(cli, cli_args + ["supplier", "list"])
    assert result.exit_code == 0
    assert "Global Parts" in result.output
    assert "Bursa" in result.output


def test_purchase_and_payment_statement(cli_runner, cli_args, sample_supplier):
    result = cli_runner.invoke(
        cli,
        cli_args
        + [
            "purchase", "add",
            "--supplier", sample_supplier.name,
            "--amount", "1.250,50",
            "--currency", "EUR",
            "--date", "2024-04-01",
            "--description", "Sac levha",
        ],
    )
    assert result.exit_code == 0
    assert "Recorded purchase" in result.output
    assert "€1.250,50" in result.output

    result = cli_runner.invoke(
        cli,
        cli_args
        + [
            "supplier-payment", "add",
            "--supplier", sample_supplier.name,
            "--amount", "250,50",
            "--currency", "EUR",
            "--date", "2024-04-15",
            "--method", "cek",
            "--check-serial", "CK-77",
            "--check-due-date", "2024-07-15",
        ],
    )
    assert result.exit_code == 0
    assert "Recorded supplier payment" in result.output

    result = cli_runner.invoke(cli, cli_args + ["supplier", "statement", str(sample_supplier.id)])
    assert result.exit_code == 0
    assert "Alış" in result.output
    assert "Çek" in result.output
    assert "EUR: €1.000,00" in result.output


def test_statement_shows_invalid_dates_last(cli_runner, cli_args, sample_supplier, temp_db):
    temp_db.create_purchase(OWNER, sample_supplier.id, "bozuk tarih", 10, "TRY")
    temp_db.create_purchase(OWNER, sample_supplier.id, "2024-01-01", 20, "TRY")

    result = cli_runner.invoke(cli, cli_args + ["supplier", "statement", sample_supplier.name])

    assert result.exit_code == 0
    assert result.output.index("01.01.2024") < result.output.index("Geçersiz Tarih")


def test_supplier_show(cli_runner, cli_args, sample_supplier):
    result = cli_runner.invoke(cli, cli_args + ["supplier", "show", sample_supplier.name])

    assert result.exit_code == 0
    assert "City: İzmir" in result.output
    assert "TRY: ₺0,00" in result.output


def test_supplier_delete_with_yes(cli_runner, cli_args, sample_supplier, supplier_service):
    result = cli_runner.invoke(cli, cli_args + ["supplier", "delete", sample_supplier.name, "--yes"])

    assert result.exit_code == 0
    assert supplier_service.get_supplier(OWNER, sample_supplier.id) is None


def test_purchase_unknown_supplier(cli_runner, cli_args):
    result = cli_runner.invoke(
        cli, cli_args + ["purchase", "add", "--supplier", "99", "--amount", "10"]
    )

    assert result.exit_code == 1
    assert "Supplier ID 99 not found" in result.output


def test_supplier_payment_delete(cli_runner, cli_args, sample_supplier, record_service):
    payment_id = record_service.add_payment_to_supplier(
        OWNER, sample_supplier.id, "2024-01-01", 10, "TRY", "nakit"
    )

    result = cli_runner.invoke(cli, cli_args + ["supplier-payment", "delete", str(payment_id)])

    assert result.exit_code == 0
    assert record_service.get_payment_to_supplier(OWNER, payment_id) is None


def test_report_receivables(cli_runner, cli_args, sample_customer, sample_supplier, record_service):
    record_service.add_sale(OWNER, sample_customer.id, "2024-01-01", 1000, "TRY")
    record_service.add_purchase(OWNER, sample_supplier.id, "2024-01-01", 300, "TRY")
    record_service.add_purchase(OWNER, sample_supplier.id, "2024-01-01", 40, "USD")

    result = cli_runner.invoke(cli, cli_args + ["report", "receivables"])

    assert result.exit_code == 0
    assert f"{sample_customer.name} (ID: {sample_customer.id}): ₺1.000,00" in result.output
    assert f"{sample_supplier.name} (ID: {sample_supplier.id}): ₺300,00, $40,00" in result.output
    assert "Net position:" in result.output
    assert "TRY: ₺700,00" in result.output
    assert "USD: -$40,00" in result.output


def test_report_empty(cli_runner, cli_args):
    result = cli_runner.invoke(cli, cli_args + ["report", "receivables"])

    assert result.exit_code == 0
    assert "(none)" in result.output


def test_verbose_flag_is_accepted(cli_runner, cli_args, sample_customer, temp_db):
    temp_db.create_sale(OWNER, sample_customer.id, "2024-01-01", None, "TRY")

    result = cli_runner.invoke(cli, cli_args + ["--verbose", "customer", "show", sample_customer.name])

    assert result.exit_code == 0


def test_supplier_update(cli_runner, cli_args, sample_supplier, supplier_service):
    result = cli_runner.invoke(
        cli, cli_args + ["supplier", "update", sample_supplier.name, "--city", "Bursa", "--sector", "Döküm"]
    )

    assert result.exit_code == 0
    assert f"Updated supplier '{sample_supplier.name}'" in result.output
    supplier = supplier_service.get_supplier(OWNER, sample_supplier.id)
    assert supplier.city == "Bursa"
    assert supplier.sector == "Döküm"


def test_purchase_update(cli_runner, cli_args, sample_supplier, record_service):
    purchase_id = record_service.add_purchase(OWNER, sample_supplier.id, "2024-04-01", 100, "TRY")

    result = cli_runner.invoke(
        cli,
        cli_args
        + ["purchase", "update", str(purchase_id), "--currency", "USD", "--item", "Sac:2:50", "--description", "Sac"],
    )

    assert result.exit_code == 0
    assert f"Updated purchase {purchase_id}: $100,00" in result.output
    purchase = record_service.get_purchase(OWNER, purchase_id)
    assert purchase.currency == "USD"
    assert purchase.description == "Sac"
    assert [item.product_name for item in purchase.items] == ["Sac"]


def test_supplier_payment_update_check_due_date(cli_runner, cli_args, sample_supplier, record_service):
    payment_id = record_service.add_payment_to_supplier(
        OWNER, sample_supplier.id, "2024-01-01", 10, "TRY", "havale"
    )

    result = cli_runner.invoke(
        cli,
        cli_args
        + [
            "supplier-payment", "update", str(payment_id),
            "--method", "cek",
            "--check-serial", "CK-9",
            "--check-due-date", "2024-05-01",
        ],
    )

    assert result.exit_code == 0
    assert "Updated supplier payment" in result.output
    payment = record_service.get_payment_to_supplier(OWNER, payment_id)
    assert payment.method == "cek"
    assert payment.check.serial_number == "CK-9"
    assert payment.check.due_date == "2024-05-01"


def test_supplier_payment_update_rejects_bad_currency(cli_runner, cli_args, sample_supplier, record_service):
    payment_id = record_service.add_payment_to_supplier(
        OWNER, sample_supplier.id, "2024-01-01", 10, "TRY", "nakit"
    )

    result = cli_runner.invoke(
        cli, cli_args + ["supplier-payment", "update", str(payment_id), "--currency", "GBP"]
    )

    assert result.exit_code == 1
    assert "Unsupported currency" in result.output
