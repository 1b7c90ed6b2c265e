"""Shell integration scripts defining the ``gn`` wrapper function."""

from __future__ import annotations

from typing import Final

from gitnav.ui.cli.args.options import ShellName

_POSIX_FUNCTION: Final[str] = """\
gn() {
  local result
  result=$(gitnav "$@")

  if [[ -n "$result" ]] && [[ -d "$result" ]]; then
    cd "$result" || return 1

    # Optional: show a quick listing after cd
    if command -v eza &> /dev/null; then
      eza -l
    elif command -v ls &> /dev/null; then
      ls -la
    fi
  fi
}
"""

_SCRIPTS: Final[dict[ShellName, str]] = {
    "zsh": (
        "# gitnav shell integration for zsh\n"
        "# Add this to your ~/.zshrc:\n"
        '#   eval "$(gitnav init zsh)"\n\n' + _POSIX_FUNCTION
    ),
    "bash": (
        "# gitnav shell integration for bash\n"
        "# Add this to your ~/.bashrc:\n"
        '#   eval "$(gitnav init bash)"\n\n' + _POSIX_FUNCTION
    ),
    "fish": """\
# gitnav shell integration for fish
# Add this to your ~/.config/fish/config.fish:
#   gitnav init fish | source

function gn
  set result (gitnav $argv)

  if test -n "$result" -a -d "$result"
    cd "$result"; or return 1

    # Optional: show a quick listing after cd
    if command -v eza &> /dev/null
      eza -l
    else if command -v ls &> /dev/null
      ls -la
    end
  end
end
""",
    "nu": """\
# gitnav shell integration for nushell
# Add this to your nushell config (typically ~/.config/nushell/config.nu):
#   gitnav init nu | save --force ~/.cache/gitnav/init.nu
#   source ~/.cache/gitnav/init.nu

def --env gn [...args] {
  let result = (gitnav ...$args | str trim)

  if ($result != "") and ($result | path exists) {
    cd $result

    # Optional: show a quick listing after cd
    if (which eza | length) > 0 {
      eza -l
    } else if (which ls | length) > 0 {
      ls
    }
  }
}
""",
}


def init_script(shell: ShellName) -> str:
    """Return the integration script for ``shell``."""

    return _SCRIPTS[shell]


__all__ = ["init_script"]
