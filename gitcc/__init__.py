"""
git-cc

Interactive Conventional Commits helper: pick a type with fzf, answer a few
prompts, and commit.
"""

__version__ = "1.0.0"

# Ordered commit types - single source of truth for the menu, enum and colors
COMMIT_TYPES = {
    'feat': 'A new feature',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Neither fixes a bug nor adds a feature',
    'perf': 'Performance improvement',
    'test': 'Adding or updating tests',
    'build': 'Build system or external dependency changes',
    'ci': 'CI configuration changes',
    'chore': "Other changes that don't modify src or test files",
    'revert': 'Reverts a previous commit',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
