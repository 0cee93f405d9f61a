"""Tests for the click CLI.

The wp-cli transport is replaced by the in-memory FakeWPCLI; everything
else (profiles, flags, provisioner, reporters) runs for real.
"""

from unittest.mock import patch

from click.testing import CliRunner

from woo_test_env.cli import main


def _invoke(tmp_path, fake, args, **kwargs):
    runner = CliRunner()
    with patch("woo_test_env.cli._make_runner", return_value=fake) as mock_make:
        result = runner.invoke(main, ["--config", str(tmp_path), *args], **kwargs)
    return result, mock_make


def test_setup_success(tmp_path, fake_wp):
    fake = fake_wp
    result, mock_make = _invoke(tmp_path, fake, ["setup", "--path", "/srv/shop", "--version", "7.3.0"])

    assert result.exit_code == 0, result.output
    assert "Success: setup completed." in result.output
    target = mock_make.call_args.args[0]
    assert target.wp.path == "/srv/shop"
    assert "woo-gutenberg-products-block" in fake.active_plugins


def test_setup_multisite_exits_1_without_provisioning(tmp_path, make_wp):
    fake = make_wp(multisite=True)
    result, _ = _invoke(tmp_path, fake, ["setup", "--path", "/srv/shop"])

    assert result.exit_code == 1
    assert "Multisite is not supported!" in result.output
    assert [c.words for c in fake.commands] == [("core", "is-installed")]


def test_setup_failure_reports_phase_and_action(tmp_path, fake_wp):
    fake = fake_wp
    fake.fail_when = lambda cmd: cmd.words == ("wc", "tax", "create")
    result, _ = _invoke(tmp_path, fake, ["setup", "--path", "/srv/shop"])

    assert result.exit_code == 1
    assert "Error: phase=tax action=add standard tax rate" in result.output
    assert fake.find("wc", "shop_coupon", "create") == []


def test_setup_prompts_for_missing_stripe_keys(tmp_path, fake_wp):
    fake = fake_wp
    result, _ = _invoke(
        tmp_path,
        fake,
        ["setup", "--path", "/srv/shop", "--stripe"],
        input="pk_test_abc\nsk_test_abc\n",
        env={"WOO_TEST_ENV_STRIPE_PUBLISHABLE_KEY": None, "WOO_TEST_ENV_STRIPE_SECRET_KEY": None},
    )

    assert result.exit_code == 0, result.output
    assert "Stripe publishable key" in result.output
    assert "pk_test_abc" in fake.options["woocommerce_stripe_settings"]


def test_setup_stripe_with_closed_stdin_skips_gateway(tmp_path, fake_wp):
    fake = fake_wp
    result, _ = _invoke(
        tmp_path,
        fake,
        ["setup", "--path", "/srv/shop", "--stripe", "--format", "plain"],
        input="",
        env={"WOO_TEST_ENV_STRIPE_PUBLISHABLE_KEY": None, "WOO_TEST_ENV_STRIPE_SECRET_KEY": None},
    )

    assert result.exit_code == 0, result.output
    assert "WARN: payments: configure Stripe gateway skipped" in result.output
    assert "Success: setup completed." in result.output
    assert "woocommerce_stripe_settings" not in fake.options


def test_setup_stripe_keys_from_env(tmp_path, fake_wp):
    fake = fake_wp
    result, _ = _invoke(
        tmp_path,
        fake,
        ["setup", "--path", "/srv/shop", "--stripe"],
        env={"WOO_TEST_ENV_STRIPE_PUBLISHABLE_KEY": "pk_env", "WOO_TEST_ENV_STRIPE_SECRET_KEY": "sk_env"},
    )

    assert result.exit_code == 0, result.output
    assert "Stripe publishable key" not in result.output
    assert "sk_env" in fake.options["woocommerce_stripe_settings"]


def test_setup_unknown_profile(tmp_path, fake_wp):
    result, mock_make = _invoke(tmp_path, fake_wp, ["setup", "--profile", "nope"])

    assert result.exit_code == 1
    assert "Profile nope not found." in result.output
    mock_make.assert_not_called()


def test_teardown_uses_profile_and_default_theme(tmp_path, fake_wp):
    runner = CliRunner()
    runner.invoke(main, ["--config", str(tmp_path), "profile", "add", "shop", "--path", "/srv/shop"])

    fake = fake_wp
    fake.active_theme = "storefront"
    result, mock_make = _invoke(
        tmp_path, fake, ["teardown", "--profile", "shop", "--default-theme", "twentytwentythree"]
    )

    assert result.exit_code == 0, result.output
    assert "Success: teardown completed." in result.output
    assert mock_make.call_args.args[0].wp.path == "/srv/shop"
    assert fake.active_theme == "twentytwentythree"


def test_profile_commands(tmp_path):
    runner = CliRunner()
    base = ["--config", str(tmp_path), "profile"]

    result = runner.invoke(main, [*base, "add", "remote", "--path", "/var/www/shop", "--ssh-host", "shop.example", "--ssh-user", "deploy"])
    assert result.exit_code == 0
    assert "Added target profile" in result.output

    result = runner.invoke(main, [*base, "list"])
    assert "remote: deploy@shop.example:/var/www/shop" in result.output

    result = runner.invoke(main, [*base, "remove", "remote"])
    assert "Removed profile" in result.output

    result = runner.invoke(main, [*base, "remove", "remote"])
    assert result.exit_code == 1
    assert "Profile remote not found." in result.output


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "woo-test-env" in result.output
