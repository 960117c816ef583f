"""Static help and manual page text."""

HELP_TEXT = """Available commands:

File Operations:
  ls [options]           List directory contents
  cd <directory>         Change directory
  pwd                    Print working directory
  touch <file>           Create an empty file
  mkdir <directory>      Create directory
  rm [-rf] <file/dir>    Remove files or directories
  cp [-r] <src> <dst>    Copy files or directories
  mv <src> <dst>         Move/rename files or directories
  cat <file>             Display file contents
  find <path> -name <p>  Search for files
  grep <pattern> <file>  Search for a pattern in files

Git Commands:
  git status             Show git status
  git add <file>         Stage changes
  git commit -m <msg>    Commit changes
  git push               Push changes
  git log                Show commit history
  git branch             List branches
  git checkout <branch>  Switch branches

npm Commands:
  npm start              Start development server
  npm test               Run tests
  npm build              Build for production
  npm install [pkg]      Install dependencies
  node [script]          Run a Node.js script

GitHub CLI:
  gh pr list             List pull requests
  gh pr create           Create pull request
  gh issue               List issues

System Commands:
  echo <text>            Display a line of text
  date                   Show the current date and time
  ps                     Report process status
  whoami                 Print current user
  man <command>          Display manual page
  history                Show command history
  clear                  Clear the terminal screen
  help                   Show this help"""

# first word of every command line in HELP_TEXT
HELP_LISTED = {line.split()[0] for line in HELP_TEXT.splitlines() if line.startswith("  ")}


def _man_page(name: str, summary: str, synopsis: str, description: str) -> str:
    header = f"{name.upper()}(1)"
    title = f"{header:<25}User Commands{header:>20}"
    return (
        f"{title}\n\n"
        f"NAME\n       {name} - {summary}\n\n"
        f"SYNOPSIS\n       {synopsis}\n\n"
        f"DESCRIPTION\n       {description}"
    )


MAN_PAGES = {
    "ls": _man_page(
        "ls",
        "list directory contents",
        "ls [OPTION]... [FILE]...",
        "List information about the FILEs (the current directory by default).",
    ),
    "cd": _man_page(
        "cd",
        "change directory",
        "cd [directory]",
        "Change the current directory to the specified directory.",
    ),
    "cat": _man_page(
        "cat",
        "concatenate files and print on the standard output",
        "cat [OPTION]... [FILE]...",
        "Concatenate FILE(s) to standard output.",
    ),
    "mkdir": _man_page(
        "mkdir",
        "make directories",
        "mkdir [OPTION]... DIRECTORY...",
        "Create the DIRECTORY(ies), if they do not already exist.",
    ),
    "touch": _man_page(
        "touch",
        "change file timestamps",
        "touch [OPTION]... FILE...",
        "Update the access and modification times of each FILE to the current time.",
    ),
    "rm": _man_page(
        "rm",
        "remove files or directories",
        "rm [OPTION]... [FILE]...",
        "Remove (unlink) the FILE(s).",
    ),
    "cp": _man_page(
        "cp",
        "copy files and directories",
        "cp [OPTION]... SOURCE DEST",
        "Copy SOURCE to DEST, or multiple SOURCE(s) to DIRECTORY.",
    ),
    "mv": _man_page(
        "mv",
        "move (rename) files",
        "mv [OPTION]... SOURCE DEST",
        "Rename SOURCE to DEST, or move SOURCE(s) to DIRECTORY.",
    ),
    "find": _man_page(
        "find",
        "search for files in a directory hierarchy",
        "find [path...] [expression]",
        "Search for files in a directory hierarchy.",
    ),
    "grep": _man_page(
        "grep",
        "print lines that match patterns",
        "grep [OPTION...] PATTERNS [FILE...]",
        "Search for PATTERNS in each FILE.",
    ),
    "echo": _man_page(
        "echo",
        "display a line of text",
        "echo [SHORT-OPTION]... [STRING]...",
        "Echo the STRING(s) to standard output.",
    ),
    "pwd": _man_page(
        "pwd",
        "print name of current/working directory",
        "pwd [OPTION]...",
        "Print the full filename of the current working directory.",
    ),
}
