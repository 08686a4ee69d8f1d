"""GitHub gateway backed by the gh CLI.

Import from submodules:
- abc: GitHub
- real: RealGitHub
- fake: FakeGitHub
- dry_run: DryRunGitHub
- types: PullRequest, RepoInfo
- parsing: parse_pull_request_list
"""
