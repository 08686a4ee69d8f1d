"""Git gateway for local repository mutations.

Import from submodules:
- abc: Git
- real: RealGit
- fake: FakeGit
- dry_run: DryRunGit
- types: MergeResult, MergeError
"""
