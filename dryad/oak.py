"""Oak: project and dependency manager for Dryad projects."""

from __future__ import annotations

import argparse
import json
import shutil
import subprocess
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CONFIG_FILE = "oaklibs.json"
_CACHE_DIRS = ("oak_modules", ".oak_cache", "target")
_TEMP_PATTERNS = ("*.log", "*.tmp")
_FUTURE_INSTALL = "⚠️  Instalação real será implementada em versões futuras"
_FUTURE_PUBLISH = "⚠️  Publicação será implementada em versões futuras"


class OakError(Exception):
    """Raised when an Oak command cannot complete."""


def _default_scripts() -> dict[str, str]:
    return {
        "start": "dryad run main.dryad",
        "test": "dryad test",
        "check": "dryad check main.dryad",
    }


@dataclass
class OakConfig:
    """Contents of a project's oaklibs.json file."""

    name: str = "meu-projeto"
    version: str = "0.1.0"
    description: str | None = None
    author: str | None = None
    license: str | None = "MIT"
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    scripts: dict[str, str] = field(default_factory=_default_scripts)

    def to_json(self) -> str:
        """Serialise to pretty-printed JSON."""
        document = {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "author": self.author,
            "license": self.license,
            "dependencies": self.dependencies,
            "dev_dependencies": self.dev_dependencies,
            "scripts": self.scripts,
        }
        return json.dumps(document, indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> OakConfig:
        """Parse a configuration, checking every field's type."""
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise OakError(f"JSON inválido: {exc}") from exc
        if not isinstance(document, dict):
            raise OakError("Configuração deve ser um objeto JSON")
        return cls(
            name=_required_str(document, "name"),
            version=_required_str(document, "version"),
            description=_optional_str(document, "description"),
            author=_optional_str(document, "author"),
            license=_optional_str(document, "license"),
            dependencies=_required_map(document, "dependencies"),
            dev_dependencies=_required_map(document, "dev_dependencies"),
            scripts=_required_map(document, "scripts"),
        )


def _required_str(document: dict[str, Any], key: str) -> str:
    if key not in document:
        raise OakError(f"campo obrigatório ausente: `{key}`")
    value = document[key]
    if not isinstance(value, str):
        raise OakError(f"campo `{key}` deve ser uma string")
    return value


def _optional_str(document: dict[str, Any], key: str) -> str | None:
    value = document.get(key)
    if value is not None and not isinstance(value, str):
        raise OakError(f"campo `{key}` deve ser uma string ou null")
    return value


def _required_map(document: dict[str, Any], key: str) -> dict[str, str]:
    if key not in document:
        raise OakError(f"campo obrigatório ausente: `{key}`")
    value = document[key]
    if not isinstance(value, dict) or not all(
        isinstance(item, str) for item in value.values()
    ):
        raise OakError(f"campo `{key}` deve ser um mapa de strings")
    return dict(value)


def _main_source(name: str) -> str:
    return f"""// {name}/main.dryad
// Projeto Dryad gerado pelo Oak

let mensagem = "Olá, {name}!";
print(mensagem);

// Exemplo de função
function somar(a, b) {{
    return a + b;
}}

let resultado = somar(5, 3);
print("5 + 3 =", resultado);
"""


def _readme(name: str) -> str:
    return f"""# {name}

Projeto criado com Oak - Gestor de Pacotes para Dryad.

## Executar

```bash
oak run start
```

ou

```bash
dryad run main.dryad
```

## Scripts Disponíveis

- `oak run start` - Executa o projeto
- `oak run test` - Executa testes
- `oak run check` - Verifica sintaxe

## Dependências

Veja o arquivo `oaklibs.json` para gerenciar dependências.
"""


_GITIGNORE = """# Oak
oaklibs.lock
oak_modules/

# Logs
*.log

# Temporários
*.tmp
*.temp

# Sistema
.DS_Store
Thumbs.db
"""


def init_project(name: str, path: str | None = None) -> Path:
    """Create a new project directory and return its path."""
    project_dir = Path(path if path is not None else name)
    if project_dir.exists():
        raise OakError(f"Diretório '{project_dir}' já existe")
    project_dir.mkdir(parents=True)

    config = OakConfig(name=name)
    (project_dir / CONFIG_FILE).write_text(config.to_json(), encoding="utf-8")
    (project_dir / "main.dryad").write_text(_main_source(name), encoding="utf-8")
    (project_dir / "README.md").write_text(_readme(name), encoding="utf-8")
    (project_dir / "src").mkdir(parents=True, exist_ok=True)
    (project_dir / ".gitignore").write_text(_GITIGNORE, encoding="utf-8")

    print(f"✓ Projeto '{name}' criado com sucesso!")
    print(f"📁 Localização: {project_dir}")
    print("\n📋 Próximos passos:")
    print(f"   cd {name}")
    print("   oak run start")
    return project_dir


def load_config() -> OakConfig:
    """Read oaklibs.json from the current directory."""
    config_path = Path(CONFIG_FILE)
    if not config_path.exists():
        raise OakError(
            "Arquivo oaklibs.json não encontrado. Execute 'oak init <nome>' primeiro."
        )
    return OakConfig.from_json(config_path.read_text(encoding="utf-8"))


def save_config(config: OakConfig) -> None:
    """Write oaklibs.json in the current directory."""
    Path(CONFIG_FILE).write_text(config.to_json(), encoding="utf-8")


def install_package(package: str | None = None, version: str | None = None) -> OakConfig:
    """Add a dependency, or list all dependencies when no package is given."""
    config = load_config()
    if package is not None:
        version = version if version is not None else "latest"
        config.dependencies[package] = version
        save_config(config)
        print(f"✓ Pacote '{package}@{version}' adicionado às dependências")
    else:
        print("📦 Instalando todas as dependências...")
        for dep_name, dep_version in config.dependencies.items():
            print(f"  - {dep_name}@{dep_version}")
    print(_FUTURE_INSTALL)
    return config


def remove_package(package: str) -> bool:
    """Remove a dependency; return whether it was present."""
    config = load_config()
    if config.dependencies.pop(package, None) is not None:
        save_config(config)
        print(f"✓ Pacote '{package}' removido das dependências")
        return True
    print(f"⚠️  Pacote '{package}' não encontrado nas dependências")
    return False


def list_dependencies() -> None:
    """Print the project's dependencies."""
    config = load_config()
    print(f"📦 Dependências do projeto '{config.name}':")
    if not config.dependencies:
        print("  Nenhuma dependência encontrada")
    for dep_name, dep_version in config.dependencies.items():
        print(f"  ├─ {dep_name}@{dep_version}")
    if config.dev_dependencies:
        print("\n🔧 Dependências de desenvolvimento:")
        for dep_name, dep_version in config.dev_dependencies.items():
            print(f"  ├─ {dep_name}@{dep_version}")


def update_dependencies() -> None:
    """Print the dependencies that would be updated."""
    config = load_config()
    print("🔄 Atualizando dependências...")
    for dep_name, dep_version in config.dependencies.items():
        print(f"  - {dep_name}@{dep_version}")
    print("⚠️  Atualização real será implementada em versões futuras")


def run_script(script: str) -> bool:
    """Run a named script; return False when the script is not defined."""
    config = load_config()
    command = config.scripts.get(script)
    if command is None:
        print(f"❌ Script '{script}' não encontrado")
        print("\n📋 Scripts disponíveis:")
        for script_name, script_command in config.scripts.items():
            print(f"  {script_name} - {script_command}")
        return False

    print(f"🚀 Executando script '{script}':")
    print(f"   {command}")
    argv = command.split()
    if not argv:
        raise OakError(f"Script '{script}' está vazio")
    try:
        completed = subprocess.run(argv)
    except OSError as exc:
        raise OakError(str(exc)) from exc
    if completed.returncode != 0:
        raise OakError(f"Script '{script}' falhou")
    return True


def clean_project() -> list[str]:
    """Remove cache directories; return the ones removed."""
    print("🧹 Limpando projeto...")
    removed = []
    for directory in _CACHE_DIRS:
        if Path(directory).exists():
            shutil.rmtree(directory)
            print(f"✓ Removido: {directory}")
            removed.append(directory)
    for pattern in _TEMP_PATTERNS:
        print(f"✓ Limpeza de arquivos: {pattern}")
    print("✅ Limpeza concluída")
    return removed


def show_info() -> None:
    """Print a summary of the project."""
    config = load_config()
    print("📋 Informações do Projeto")
    print("━━━━━━━━━━━━━━━━━━━━━━━━")
    print(f"Nome:        {config.name}")
    print(f"Versão:      {config.version}")
    if config.description is not None:
        print(f"Descrição:   {config.description}")
    if config.author is not None:
        print(f"Autor:       {config.author}")
    if config.license is not None:
        print(f"Licença:     {config.license}")
    print(f"Dependências: {len(config.dependencies)}")
    print(f"Scripts:      {len(config.scripts)}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oak", description="Oak - Gestor de Pacotes para Dryad"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    init = commands.add_parser("init", help="Inicializa um novo projeto Dryad")
    init.add_argument("name", help="Nome do projeto")
    init.add_argument("-p", "--path", help="Diretório para criar o projeto")

    install = commands.add_parser("install", help="Instala dependências do projeto")
    install.add_argument("package", nargs="?", help="Nome do pacote para instalar")
    install.add_argument("-v", "--version", help="Versão específica")

    remove = commands.add_parser("remove", help="Remove uma dependência")
    remove.add_argument("package", help="Nome do pacote para remover")

    commands.add_parser("list", help="Lista dependências instaladas")
    commands.add_parser("update", help="Atualiza dependências")
    commands.add_parser("publish", help="Publica um pacote")

    run = commands.add_parser("run", help="Executa scripts definidos no projeto")
    run.add_argument("script", help="Nome do script para executar")

    commands.add_parser("clean", help="Limpa cache e arquivos temporários")
    commands.add_parser("info", help="Mostra informações do projeto")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the oak command line and return its exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "publish":
        print(_FUTURE_PUBLISH)
        return 0

    actions: dict[str, tuple[Callable[[], object], str]] = {
        "init": (lambda: init_project(args.name, args.path), "Erro ao inicializar projeto"),
        "install": (lambda: install_package(args.package, args.version), "Erro ao instalar"),
        "remove": (lambda: remove_package(args.package), "Erro ao remover"),
        "list": (list_dependencies, "Erro ao listar"),
        "update": (update_dependencies, "Erro ao atualizar"),
        "run": (lambda: run_script(args.script), "Erro ao executar script"),
        "clean": (clean_project, "Erro ao limpar"),
        "info": (show_info, "Erro ao mostrar informações"),
    }
    action, prefix = actions[args.command]
    try:
        action()
    except (OakError, OSError) as exc:
        print(f"{prefix}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())