"""Dockerfile rendering for each language handler."""

from __future__ import annotations

from dockgen.handlers import (
    CSharpHandler,
    CppHandler,
    GoHandler,
    JavaHandler,
    NodeHandler,
    PHPHandler,
    PythonHandler,
    RubyHandler,
    RustHandler,
)


def test_python_uses_requirements_when_present(repo_builder) -> None:
    root = repo_builder.write({"requirements.txt": "flask\n", "main.py": "import flask\n"})

    output = PythonHandler().generate(root, {"flask"})

    assert output == (
        "FROM python:3.9\n"
        "WORKDIR /app\n"
        "COPY . /app\n"
        "RUN pip install --upgrade pip && pip install -r requirements.txt\n"
        'CMD ["python","main.py"]\n'
    )


def test_python_lists_captured_modules_in_sorted_order(repo_builder) -> None:
    root = repo_builder.write({"main.py": "import requests\n"})

    output = PythonHandler().generate(root, {"requests", "flask", "numpy"})

    assert "RUN pip install --upgrade pip && pip install flask numpy requests\n" in output


def test_python_omits_install_step_without_dependencies(repo_builder) -> None:
    root = repo_builder.write({"main.py": "print('hi')\n"})

    output = PythonHandler().generate(root, set())

    assert output == (
        "FROM python:3.9\n"
        "WORKDIR /app\n"
        "COPY . /app\n"
        'CMD ["python","main.py"]\n'
    )


def test_node_installs_from_package_json_or_captured_names(repo_builder) -> None:
    root = repo_builder.write({"index.js": "require('express')\n"})
    handler = NodeHandler()

    itemised = handler.generate(root, {"express", "cors"})
    repo_builder.write({"package.json": "{}\n"})
    manifest = handler.generate(root, {"express", "cors"})

    assert "RUN npm install cors express\n" in itemised
    assert "RUN npm install\n" in manifest
    assert "cors" not in manifest
    assert manifest.startswith("FROM node:14\n")
    assert manifest.endswith('CMD ["npm","start"]\n')


def test_java_build_depends_on_manifest(repo_builder) -> None:
    handler = JavaHandler()
    root = repo_builder.write({"Main.java": "class Main {}\n"})

    bare = handler.generate(root, {"java.util.List"})
    repo_builder.write({"build.gradle": "plugins {}\n"})
    gradle = handler.generate(root, set())
    repo_builder.write({"pom.xml": "<project />\n"})
    maven = handler.generate(root, set())

    assert bare.startswith("FROM openjdk:11\nWORKDIR /app\nCOPY . /app\n# ")
    assert "RUN" not in bare
    assert "CMD" not in bare
    assert gradle.endswith('RUN gradle build\nCMD ["java","-jar","build/libs/app.jar"]\n')
    assert maven.endswith('RUN mvn install\nCMD ["java","-jar","target/app.jar"]\n')


def test_ruby_uses_bundler_or_gem_install(repo_builder) -> None:
    root = repo_builder.write({"main.rb": "require 'sinatra'\n"})
    handler = RubyHandler()

    itemised = handler.generate(root, {"sinatra"})
    repo_builder.write({"Gemfile": "source 'https://rubygems.org'\n"})
    bundled = handler.generate(root, {"sinatra"})

    assert itemised == (
        "FROM ruby:2.7\n"
        "WORKDIR /app\n"
        "COPY . /app\n"
        "RUN gem install sinatra\n"
        'CMD ["ruby","main.rb"]\n'
    )
    assert "RUN bundle install\n" in bundled
    assert "gem install" not in bundled


def test_php_targets_apache_document_root(repo_builder) -> None:
    root = repo_builder.write({"index.php": "<?php require 'vendor/autoload.php';\n"})
    handler = PHPHandler()

    itemised = handler.generate(root, {"vendor/autoload.php"})
    repo_builder.write({"composer.json": "{}\n"})
    composer = handler.generate(root, set())

    assert itemised == (
        "FROM php:7.4-apache\n"
        "WORKDIR /var/www/html\n"
        "COPY . /var/www/html\n"
        "RUN composer require vendor/autoload.php\n"
        'CMD ["apache2-foreground"]\n'
    )
    assert "RUN composer install\n" in composer


def test_go_always_builds_and_downloads_modules_only_with_go_mod(repo_builder) -> None:
    root = repo_builder.write({"main.go": 'package main\nimport "fmt"\n'})
    handler = GoHandler()

    without_mod = handler.generate(root, {"fmt"})
    repo_builder.write({"go.mod": "module demo\n"})
    with_mod = handler.generate(root, {"fmt"})

    assert without_mod == (
        "FROM golang:1.16\n"
        "WORKDIR /app\n"
        "COPY . /app\n"
        "RUN go build -o main .\n"
        'CMD ["./main"]\n'
    )
    assert "RUN go mod download\nRUN go build -o main .\n" in with_mod


def test_csharp_restores_builds_and_runs(repo_builder) -> None:
    root = repo_builder.write({"Program.cs": "class Program {}\n"})

    assert CSharpHandler().generate(root, set()) == (
        "FROM mcr.microsoft.com/dotnet/sdk:5.0\n"
        "WORKDIR /app\n"
        "COPY . /app\n"
        "RUN dotnet restore\n"
        "RUN dotnet build\n"
        'CMD ["dotnet","run"]\n'
    )


def test_cpp_compiles_sources_in_one_invocation(repo_builder) -> None:
    root = repo_builder.write({"main.cpp": "int main() {}\n"})

    assert CppHandler().generate(root, set()) == (
        "FROM gcc:latest\n"
        "WORKDIR /app\n"
        "COPY . /app\n"
        "RUN g++ -o main *.cpp\n"
        'CMD ["./main"]\n'
    )


def test_rust_release_build_requires_cargo_manifest(repo_builder) -> None:
    root = repo_builder.write({"src/main.rs": "fn main() {}\n"})
    handler = RustHandler()

    bare = handler.generate(root, set())
    repo_builder.write({"Cargo.toml": "[package]\nname = \"demo\"\n"})
    cargo = handler.generate(root, set())

    assert "cargo build" not in bare
    assert bare.splitlines()[3].startswith("# ")
    assert "RUN cargo build --release\n" in cargo
    for output in (bare, cargo):
        assert output.startswith("FROM rust:latest\n")
        assert output.endswith('CMD ["./target/release/<your_binary>"]\n')
