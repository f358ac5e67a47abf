"""Tests for promptgen.orchestrator."""

from __future__ import annotations

import logging

import pytest

from promptgen.config import RunOptions
from promptgen.errors import AmbiguousInstructionError, UnsupportedModeError
from promptgen.orchestrator import Orchestrator

_PACKAGE_FILES = {
    "App/Package.swift": """
        // swift-tools-version:5.9
        import PackageDescription
    """,
    "App/Sources/Cart.swift": """
        struct Cart {
            var items: [CartItem]
            var presenter: CartPresenter?
            // TODO: - Add a total price
        }
    """,
    "App/Sources/CartItem.swift": """
        struct CartItem {
            let price: Decimal
        }
    """,
    "App/Sources/CartPresenter.swift": """
        final class CartPresenter {}
    """,
    "App/Sources/CartViewController.swift": """
        final class CartViewController {
            let cart: Cart
        }
    """,
    "Legacy/OldCart.swift": """
        class Cart {}
    """,
}


@pytest.fixture
def shop(repo_builder):
    repo_builder.write(_PACKAGE_FILES)
    return repo_builder


def _names(result) -> list[str]:
    return [path.relative_to(result.git_root).as_posix() for path in result.files]


def test_run_scopes_definition_search_to_package(shop, fake_git) -> None:
    result = Orchestrator(git_runner=fake_git).run(shop.path())

    assert result.git_root == shop.path()
    assert result.search_root == shop.path("App")
    assert {"Cart", "CartItem", "CartPresenter"} <= set(result.type_names)
    assert _names(result) == [
        "App/Sources/Cart.swift",
        "App/Sources/CartItem.swift",
        "App/Sources/CartPresenter.swift",
    ]
    text = result.bundle.text
    assert "// TODO: ChatGPT: Add a total price" in text
    assert text.endswith("\n// TODO: - Add a total price")
    assert result.bundle.warning is None


def test_run_from_subdirectory_uses_git_root(shop, fake_git) -> None:
    result = Orchestrator(git_runner=fake_git).run(shop.path("App/Sources"))

    assert result.git_root == shop.path()
    assert result.marker.path == shop.path("App/Sources/Cart.swift")


def test_force_global_searches_whole_repository(shop, fake_git) -> None:
    result = Orchestrator(git_runner=fake_git).run(shop.path(), RunOptions(force_global=True))

    assert result.search_root == shop.path()
    assert "Legacy/OldCart.swift" in _names(result)


def test_singular_mode_only_includes_instruction_file(shop, fake_git) -> None:
    result = Orchestrator(git_runner=fake_git).run(shop.path(), RunOptions(singular=True))

    assert _names(result) == ["App/Sources/Cart.swift"]
    assert result.type_names == ()


def test_slim_mode_drops_non_model_files(shop, fake_git) -> None:
    result = Orchestrator(git_runner=fake_git).run(shop.path(), RunOptions(slim=True))

    assert _names(result) == ["App/Sources/Cart.swift", "App/Sources/CartItem.swift"]


def test_excluded_basenames_are_removed(shop, fake_git) -> None:
    options = RunOptions(excludes=("CartItem.swift",))
    result = Orchestrator(git_runner=fake_git).run(shop.path(), options)

    assert "App/Sources/CartItem.swift" not in _names(result)
    assert "App/Sources/Cart.swift" in _names(result)


def test_include_references_adds_usage_sites(shop, fake_git) -> None:
    options = RunOptions(include_references=True)
    result = Orchestrator(git_runner=fake_git).run(shop.path(), options)

    assert "App/Sources/CartViewController.swift" in _names(result)
    assert "Legacy/OldCart.swift" not in _names(result)


def test_include_references_requires_swift_instruction(repo_builder, fake_git) -> None:
    repo_builder.write({"Sources/Cart.m": "// TODO: - Explain\n"})

    with pytest.raises(UnsupportedModeError):
        Orchestrator(git_runner=fake_git).run(
            repo_builder.path(), RunOptions(include_references=True)
        )


def test_javascript_instruction_forces_singular_mode(repo_builder, fake_git) -> None:
    repo_builder.write(
        {
            "web/app.js": "// TODO: - Render the Widget\nconst w = new Widget();\n",
            "web/widget.js": "class Widget {}\n",
        }
    )

    result = Orchestrator(git_runner=fake_git).run(repo_builder.path())

    assert result.options.singular is True
    assert _names(result) == ["web/app.js"]


def test_diff_sections_follow_configured_branch(shop, fake_git) -> None:
    fake_git.diffs["CartItem.swift"] = "@@ -1 +1 @@\n-struct CartItem {}\n+struct CartItem {\n"
    options = RunOptions(diff_with="main")

    result = Orchestrator(git_runner=fake_git).run(shop.path(), options)

    text = result.bundle.text
    assert "The diff for CartItem.swift (against branch `main`) is as follows:" in text
    assert "The diff for Cart.swift" not in text
    diff_calls = [args for args, _cwd in fake_git.calls if args[:2] == ["git", "diff"]]
    assert ["git", "diff", "main", "--", "Cart.swift"] in diff_calls


def test_no_diff_sections_without_branch(shop, fake_git) -> None:
    fake_git.diffs["CartItem.swift"] = "+changed\n"

    result = Orchestrator(git_runner=fake_git).run(shop.path())

    assert "against branch" not in result.bundle.text
    assert not any(args[:2] == ["git", "diff"] for args, _cwd in fake_git.calls)


def test_ambiguous_instruction_aborts_run(shop, fake_git) -> None:
    shop.write({"Legacy/Other.swift": "// TODO: ChatGPT: second\n"})

    with pytest.raises(AmbiguousInstructionError):
        Orchestrator(git_runner=fake_git).run(shop.path())


def test_git_root_resolves_from_a_subdirectory(shop, fake_git) -> None:
    assert Orchestrator(git_runner=fake_git).git_root(shop.path("App/Sources")) == shop.path()


def test_run_logs_type_names_one_per_line(shop, fake_git, caplog) -> None:
    logger = logging.getLogger("promptgen.orchestrator")
    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.INFO, logger="promptgen.orchestrator"):
            result = Orchestrator(git_runner=fake_git).run(shop.path())
    finally:
        logger.removeHandler(caplog.handler)

    assert "Types found:\n" + "\n".join(result.type_names) in caplog.text
