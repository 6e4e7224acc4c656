"""CLI Commands"""

import os
import sys

from gitcc.config import ENV_OVERRIDES, load_config, get_config_path
from gitcc.output import bold, dim, info


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .gitccrc found)")

    env_set = {name: os.environ[name] for name in ENV_OVERRIDES if os.environ.get(name)}
    if env_set:
        print(f"  {dim('Environment overrides:')}")
        for name, value in env_set.items():
            print(f"    {name}={value}")

    print()
    print(f"  {bold('Settings:')}")
    for key, value in config.to_dict().items():
        shown = str(value).lower() if isinstance(value, bool) else str(value)
        print(f"    {(key + ':').ljust(20)}{info(shown)}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .gitccrc (in current directory)")
    print(f"    Global: ~/.gitccrc\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    line = 'eval "$(register-python-argcomplete git-cc)"'
    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell git-cc | Out-String | Invoke-Expression\n")
        print("To make it permanent, add it to your $PROFILE.")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish git-cc | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags and commit types.')}")
    return 0
