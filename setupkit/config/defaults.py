"""
Default configuration values and templates.

Provides the stock Next.js + Storybook checklist and scaffold settings.
"""

from typing import Any, Dict, List


DEFAULT_DEV_DEPENDENCIES = [
    "vitest",
    "@testing-library/react",
    "@testing-library/jest-dom",
    "@testing-library/user-event",
    "jsdom",
    "@vitejs/plugin-react",
    "@playwright/test",
    "@storybook/test",
    "@storybook/react",
    "@storybook/test-runner",
]

DEFAULT_SCRIPTS = {
    "test": "vitest",
    "test:ui": "vitest --ui",
    "test:coverage": "vitest --coverage",
    "storybook:test": "test-storybook",
    "storybook:test:watch": "test-storybook --watch",
    "e2e": "playwright test",
    "e2e:ui": "playwright test --ui",
}

SCRIPT_DESCRIPTIONS = {
    "test": "Run unit tests",
    "test:ui": "Run unit tests with UI",
    "test:coverage": "Run unit tests with coverage",
    "storybook:test": "Run Storybook interaction tests",
    "storybook:test:watch": "Run Storybook tests in watch mode",
    "e2e": "Run end-to-end tests",
    "e2e:ui": "Run e2e tests with UI",
}


def _check(kind: str, target: str, description: str) -> Dict[str, str]:
    return {"description": description, "kind": kind, "target": target}


def _packages(names: List[str]) -> List[Dict[str, str]]:
    return [_check("package_declared", n, f"{n} package installed") for n in names]


def get_default_checklist(component: str = "Button") -> Dict[str, Any]:
    """Get the default Next.js + Storybook checklist.

    Args:
        component: Sample component whose files are expected under src/components
    """
    return {
        "name": "nextjs-storybook",
        "manifest_mode": "substring",
        "sections": [
            {
                "title": "Prerequisites",
                "checks": [
                    _check("command_available", "node", "Node.js installed"),
                    _check("command_available", "pnpm", "pnpm installed"),
                ],
            },
            {
                "title": "Next.js Setup",
                "checks": [
                    _check("file_exists", "package.json", "package.json exists"),
                    _check("file_exists", "next.config.ts", "Next.js configuration (next.config.ts)"),
                    _check("file_exists", "tsconfig.json", "TypeScript configuration"),
                    _check("dir_exists", "src", "src/ directory exists"),
                    _check("dir_exists", "public", "public/ directory exists"),
                ],
            },
            {
                "title": "Storybook Setup",
                "checks": [
                    _check("dir_exists", ".storybook", ".storybook/ configuration directory"),
                    _check("file_exists", ".storybook/main.ts", "Storybook main configuration"),
                    _check("file_exists", ".storybook/preview.ts", "Storybook preview configuration"),
                    _check("package_declared", "storybook", "Storybook package installed"),
                ] + _packages(["@storybook/react", "@storybook/nextjs"]),
            },
            {
                "title": "Components and Stories",
                "checks": [
                    _check("dir_exists", "src/components", "src/components/ directory exists"),
                    _check(
                        "file_exists",
                        f"src/components/{component}.tsx",
                        f"{component} component ({component}.tsx)",
                    ),
                    _check(
                        "file_exists",
                        f"src/components/{component}.stories.tsx",
                        f"{component} component story ({component}.stories.tsx)",
                    ),
                ],
            },
            {
                "title": "Test Setup",
                "checks": [
                    _check("file_exists", "vitest.config.ts", "Vitest configuration"),
                    _check("file_exists", "src/test/setup.ts", "Test setup file"),
                    _check(
                        "file_exists",
                        f"src/components/{component}.test.tsx",
                        f"{component} component test",
                    ),
                    _check("package_declared", "vitest", "Vitest package installed"),
                ] + _packages([
                    "@testing-library/react",
                    "@testing-library/jest-dom",
                    "@testing-library/user-event",
                ]),
            },
            {
                "title": "package.json Scripts",
                "checks": [
                    _check("script_declared", "dev", "Next.js dev script defined"),
                    _check("script_declared", "build", "Next.js build script defined"),
                    _check("script_declared", "storybook", "Storybook start script defined"),
                    _check("script_declared", "test", "Test script defined"),
                ],
            },
        ],
    }


def get_default_scaffold() -> Dict[str, Any]:
    """Get default scaffold configuration."""
    return {
        "project_name": "my-app",
        "component_name": "Button",
        "dev_port": 3000,
        "dev_dependencies": list(DEFAULT_DEV_DEPENDENCIES),
        "scripts": dict(DEFAULT_SCRIPTS),
        "script_descriptions": dict(SCRIPT_DESCRIPTIONS),
        "run_tests": True,
    }
