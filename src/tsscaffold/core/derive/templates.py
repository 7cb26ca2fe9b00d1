"""Fixed templates for the TypeScript library layout."""

from __future__ import annotations

from typing import Any

COMPILER_PACKAGE = "typescript"
COMPILER_STEP = "tsc"
BUILD_SCRIPT = "tsc"

JEST_PACKAGES = ("jest", "ts-jest", "@types/jest")
JEST_CONFIG_FILE = "jestconfig.json"
TEST_SCRIPT = f"jest --config {JEST_CONFIG_FILE}"

ESLINT_PACKAGES = ("eslint", "@typescript-eslint/parser", "@typescript-eslint/eslint-plugin")
LINT_SCRIPT = "eslint . --ext .ts"
LINT_STEP = "npm run lint"

PRETTIER_PACKAGES = ("prettier",)
FORMAT_STEP = "npm run format"

PACKAGE_VERSION = "1.0.0"
PACKAGE_LICENSE = "ISC"

COMPILER_TARGET = "ES6"
COMPILER_INCLUDE = ("src/**/*", "tests/**/*")
COMPILER_EXCLUDE = ("node_modules", "**/__tests__/*")

SOURCE_DIR = "src"
SOURCE_ENTRY = "src/index.ts"
SOURCE_STUB = 'console.log("Hello world!");'
TESTS_DIR = "tests"
TESTS_ENTRY = "tests/test.ts"


def format_script(out_dir: str) -> str:
    return f'prettier --write "{out_dir}/**/*.ts" "{out_dir}/**/*.js"'


def prettier_config() -> dict[str, Any]:
    return {
        "printWidth": 120,
        "trailingComma": "all",
        "singleQuote": True,
    }


def eslint_config() -> dict[str, Any]:
    return {
        "root": True,
        "parser": "@typescript-eslint/parser",
        "plugins": ["@typescript-eslint"],
        "extends": [
            "eslint:recommended",
            "plugin:@typescript-eslint/eslint-recommended",
            "plugin:@typescript-eslint/recommended",
        ],
    }


def jest_config() -> dict[str, Any]:
    return {
        "transform": {"^.+\\.(t|j)sx?$": "ts-jest"},
        "testRegex": "(/__tests__/.*|(\\.|/)(test|spec))\\.(jsx?|tsx?)$",
        "moduleFileExtensions": ["ts", "tsx", "js", "jsx", "json", "node"],
    }


def ignore_lines(out_dir: str) -> str:
    """Body shared by ``.gitignore`` and ``.eslintignore``."""
    return f"node_modules\n{out_dir}\n"
