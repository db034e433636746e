"""Built-in technology detection table."""

from __future__ import annotations

from projectdump.domain.entities import TechPattern

DEFAULT_TECH_PATTERNS: tuple[TechPattern, ...] = (
    TechPattern(
        name="JavaScript",
        files=frozenset({"package.json", "package-lock.json", "yarn.lock"}),
        extensions=frozenset({".js", ".mjs", ".jsx"}),
        keywords=("require(", "import ", "export ", "module.exports"),
        description="JavaScript runtime and ecosystem",
    ),
    TechPattern(
        name="TypeScript",
        files=frozenset({"tsconfig.json", "tslint.json"}),
        extensions=frozenset({".ts", ".tsx"}),
        keywords=("interface ", "type ", ": string", ": number"),
        description="TypeScript - JavaScript with static typing",
    ),
    TechPattern(
        name="React",
        extensions=frozenset({".jsx", ".tsx"}),
        keywords=("React.", "useState", "useEffect", "jsx"),
        description="React JavaScript library for building user interfaces",
    ),
    TechPattern(
        name="Node.js",
        files=frozenset({"package.json"}),
        extensions=frozenset({".js"}),
        keywords=("require('", "module.exports", "process.env"),
        description="Node.js JavaScript runtime",
    ),
    TechPattern(
        name="Python",
        files=frozenset({"requirements.txt", "setup.py", "pyproject.toml", "Pipfile"}),
        extensions=frozenset({".py", ".pyw"}),
        keywords=("def ", "import ", "from ", "__init__"),
        description="Python programming language",
    ),
    TechPattern(
        name="Go",
        files=frozenset({"go.mod", "go.sum"}),
        extensions=frozenset({".go"}),
        keywords=("package ", "func ", "import ", "type "),
        description="Go programming language",
    ),
    TechPattern(
        name="Java",
        files=frozenset({"pom.xml", "build.gradle", "gradle.properties"}),
        extensions=frozenset({".java"}),
        keywords=("public class", "import java", "package "),
        description="Java programming language",
    ),
    TechPattern(
        name="Kotlin",
        files=frozenset({"build.gradle.kts", "settings.gradle.kts"}),
        extensions=frozenset({".kt", ".kts"}),
        keywords=("fun main(", "import kotlin"),
        description="Kotlin programming language",
    ),
    TechPattern(
        name="Swift",
        files=frozenset({"Package.swift"}),
        extensions=frozenset({".swift"}),
        keywords=("import Foundation", "import SwiftUI", "guard let"),
        description="Swift programming language",
    ),
    TechPattern(
        name="C#",
        extensions=frozenset({".cs"}),
        keywords=("using System", "namespace ", "{ get; set; }"),
        description="C# programming language for .NET",
    ),
    TechPattern(
        name="C++",
        files=frozenset({"CMakeLists.txt", "Makefile"}),
        extensions=frozenset({".cpp", ".cc", ".cxx", ".h", ".hpp"}),
        keywords=("#include", "using namespace", "std::"),
        description="C++ programming language",
    ),
    TechPattern(
        name="C",
        files=frozenset({"Makefile"}),
        extensions=frozenset({".c", ".h"}),
        keywords=("#include", "int main", "printf"),
        description="C programming language",
    ),
    TechPattern(
        name="Rust",
        files=frozenset({"Cargo.toml", "Cargo.lock"}),
        extensions=frozenset({".rs"}),
        keywords=("fn ", "use ", "mod ", "pub "),
        description="Rust systems programming language",
    ),
    TechPattern(
        name="PHP",
        files=frozenset({"composer.json", "composer.lock"}),
        extensions=frozenset({".php"}),
        keywords=("<?php", "function ", "$_GET", "$_POST"),
        description="PHP server-side scripting language",
    ),
    TechPattern(
        name="Ruby",
        files=frozenset({"Gemfile", "Gemfile.lock"}),
        extensions=frozenset({".rb"}),
        keywords=("def ", "class ", "require ", "end"),
        description="Ruby programming language",
    ),
    TechPattern(
        name="Shell",
        extensions=frozenset({".sh", ".bash"}),
        keywords=("#!/bin/sh", "#!/bin/bash", "#!/usr/bin/env bash"),
        description="Unix shell scripting",
    ),
    TechPattern(
        name="CSS",
        extensions=frozenset({".css", ".scss", ".sass", ".less"}),
        keywords=("{", "}", ":", ";", "@media"),
        description="Cascading Style Sheets",
    ),
    TechPattern(
        name="HTML",
        extensions=frozenset({".html", ".htm"}),
        keywords=("<html", "<body", "<div", "<!DOCTYPE"),
        description="HyperText Markup Language",
    ),
    TechPattern(
        name="Docker",
        files=frozenset(
            {"Dockerfile", "docker-compose.yml", "docker-compose.yaml", ".dockerignore"}
        ),
        keywords=("FROM ", "RUN ", "COPY ", "CMD "),
        description="Docker containerization platform",
    ),
    TechPattern(
        name="Kubernetes",
        extensions=frozenset({".yaml", ".yml"}),
        keywords=("apiVersion:", "kind:", "metadata:", "spec:"),
        description="Kubernetes container orchestration",
    ),
)
