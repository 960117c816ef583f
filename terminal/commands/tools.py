"""Simulated developer tools: npm, node, gh, git.

None of these run anything. Each recognises a fixed set of subcommands and
returns canned output; unknown subcommands are reported by name.
"""

from terminal.commands.base import CommandContext, CommandRegistry
from terminal.result import CommandResult

NPM_OUTPUT = {
    "start": (
        "Starting development server...\n\n"
        "Compiled successfully!\n\n"
        "You can now view the app in the browser.\n\n"
        "  Local:            http://localhost:3000\n"
        "  On Your Network:  http://192.168.0.45:3000"
    ),
    "test": (
        "PASS  src/__tests__/app.test.js\n"
        "PASS  src/__tests__/components.test.js\n\n"
        "Test Suites: 2 passed, 2 total\n"
        "Tests:       7 passed, 7 total\n"
        "Snapshots:   0 total\n"
        "Time:        1.234s"
    ),
    "build": (
        "Creating an optimized production build...\n"
        "Compiled successfully.\n\n"
        "File sizes after gzip:\n\n"
        "  142.32 KB  build/static/js/main.a1b2c3d4.js\n"
        "  23.45 KB   build/static/css/main.a1b2c3d4.css"
    ),
}

GH_PR_OUTPUT = {
    "list": (
        "Showing 2 of 2 open pull requests in username/repo\n\n"
        "#42  Update documentation  user1  [feature/docs]  1d\n"
        "#41  Fix terminal component  user2  [bugfix/terminal]  2d"
    ),
    "create": (
        "Creating pull request for feature-branch into main in username/repo\n\n"
        "Pull request created: https://github.com/username/repo/pull/43"
    ),
}

GH_ISSUE_OUTPUT = (
    "Showing 3 of 3 open issues in username/repo\n\n"
    "#39  Improve performance  user1  2d\n"
    "#38  Add test coverage  user2  3d\n"
    "#37  Update dependencies  user3  1w"
)

GIT_OUTPUT = {
    "status": (
        "On branch main\n"
        "Your branch is up to date with 'origin/main'.\n\n"
        "Changes not staged for commit:\n"
        '  (use "git add <file>..." to update what will be committed)\n'
        '  (use "git restore <file>..." to discard changes in working directory)\n'
        "        modified:   src/components/Terminal.js\n"
        "        modified:   src/components/FileViewer.js\n\n"
        'no changes added to commit (use "git add" and/or "git commit -a")'
    ),
    "add": "",
    "commit": (
        "[main a1b2c3d] Update terminal and file viewer components\n"
        " 2 files changed, 150 insertions(+), 20 deletions(-)"
    ),
    "push": (
        "Enumerating objects: 7, done.\n"
        "Counting objects: 100% (7/7), done.\n"
        "Delta compression using up to 8 threads\n"
        "Compressing objects: 100% (4/4), done.\n"
        "Writing objects: 100% (4/4), 1.23 KiB | 1.23 MiB/s, done.\n"
        "Total 4 (delta 3), reused 0 (delta 0), pack-reused 0\n"
        "remote: Resolving deltas: 100% (3/3), completed with 3 local objects.\n"
        "To github.com:username/repo.git\n"
        "   a1b2c3d..e4f5g6h  main -> main"
    ),
    "log": (
        "commit a1b2c3d4e5f6g7h8i9j0k1l2m3n4o5p6q7r8s9t\n"
        "Author: User <user@example.com>\n"
        "Date:   Mon Mar 1 12:34:56 2024 -0800\n\n"
        "    Update terminal and file viewer components\n\n"
        "commit b2c3d4e5f6g7h8i9j0k1l2m3n4o5p6q7r8s9t0\n"
        "Author: User <user@example.com>\n"
        "Date:   Sun Feb 29 12:34:56 2024 -0800\n\n"
        "    Initial commit"
    ),
    "branch": "* main\n  feature/file-viewer\n  feature/terminal",
}

NODE_BANNER = 'Welcome to Node.js v18.16.0.\nType ".help" for more information.'


def npm(ctx: CommandContext) -> CommandResult:
    if not ctx.args:
        return CommandResult.text("npm: missing command")

    sub_command = ctx.args[0]
    if sub_command == "install":
        if len(ctx.args) > 1:
            return CommandResult.text(
                f"+ {ctx.args[1]}@1.2.3\nadded 42 packages from 23 contributors in 2.5s"
            )
        return CommandResult.text("added 1344 packages in 30s")

    if sub_command in NPM_OUTPUT:
        return CommandResult.text(NPM_OUTPUT[sub_command])
    return CommandResult.text(f"Unknown npm command: {sub_command}")


def node(ctx: CommandContext) -> CommandResult:
    """Pretend to run a script that exists in the tree, or show the REPL banner."""
    if not ctx.args:
        return CommandResult.text(NODE_BANNER)

    script = ctx.args[0]
    if ctx.filesystem.file_exists(ctx.resolve(script)):
        return CommandResult.text(f"Simulated execution of Node.js script: {script}")
    return CommandResult.text(f"Error: Cannot find module '{script}'")


def gh(ctx: CommandContext) -> CommandResult:
    if not ctx.args:
        return CommandResult.text("gh: missing command")

    sub_command = ctx.args[0]
    if sub_command == "pr":
        if len(ctx.args) < 2:
            return CommandResult.text("gh pr: missing subcommand")
        pr_command = ctx.args[1]
        if pr_command in GH_PR_OUTPUT:
            return CommandResult.text(GH_PR_OUTPUT[pr_command])
        return CommandResult.text(f"Unknown gh pr command: {pr_command}")

    if sub_command == "issue":
        return CommandResult.text(GH_ISSUE_OUTPUT)

    return CommandResult.text(f"Unknown gh command: {sub_command}")


def git(ctx: CommandContext) -> CommandResult:
    if not ctx.args:
        return CommandResult.text("git: missing command")

    sub_command = ctx.args[0]
    if sub_command == "checkout":
        branch = ctx.args[1] if len(ctx.args) > 1 else "main"
        return CommandResult.text(f"Switched to branch '{branch}'")

    if sub_command in GIT_OUTPUT:
        return CommandResult.text(GIT_OUTPUT[sub_command])
    return CommandResult.text(f"Unknown git command: {sub_command}")


def register_commands(registry: CommandRegistry) -> None:
    """Register the simulated developer tools."""
    registry.register("npm", npm, "Node package manager")
    registry.register("node", node, "Run a Node.js script")
    registry.register("gh", gh, "GitHub CLI")
    registry.register("git", git, "Version control")
