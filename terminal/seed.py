"""Initial contents of the virtual tree.

Every new session starts from this fixed project layout. Nothing is persisted,
so a reset always returns to exactly this tree.
"""

from terminal.filesystem import FileEntry, VirtualFileSystem

SEED_DIRECTORIES = [
    "",
    "src",
    "src/components",
    "src/services",
    "public",
    "node_modules",
]

SEED_FILES = {
    "package.json": """{
  "name": "third",
  "version": "1.0.0",
  "main": "index.js",
  "scripts": {
    "start": "react-scripts start",
    "build": "react-scripts build",
    "test": "react-scripts test",
    "eject": "react-scripts eject"
  },
  "description": "Web interface with Claude chat, file viewer, and terminal",
  "dependencies": {
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
    "react-scripts": "^5.0.1",
    "styled-components": "^6.1.1",
    "xterm": "^5.3.0",
    "xterm-addon-fit": "^0.8.0",
    "axios": "^1.6.0"
  }
}""",
    "README.md": """# Claude Web Interface

A web interface application with three panels for interacting with Claude:

- **Left Panel**: Chat interface for conversing with Claude
- **Upper Right Panel**: File viewer for browsing local repository files
- **Bottom Right Panel**: Terminal for running commands (gh, npm, etc.)""",
    "src/index.js": """import React from 'react';
import ReactDOM from 'react-dom/client';
import App from './App';
import './index.css';

const root = ReactDOM.createRoot(document.getElementById('root'));
root.render(
  <React.StrictMode>
    <App />
  </React.StrictMode>
);""",
    "src/App.js": """import React from 'react';
import styled from 'styled-components';
import ChatWindow from './components/ChatWindow';
import FileViewer from './components/FileViewer';
import Terminal from './components/Terminal';

function App() {
  return (
    <AppContainer>
      <ChatContainer>
        <ChatWindow />
      </ChatContainer>
      <FileViewerContainer>
        <FileViewer />
      </FileViewerContainer>
      <TerminalContainer>
        <Terminal />
      </TerminalContainer>
    </AppContainer>
  );
}

export default App;""",
    "src/index.css": """body {
  margin: 0;
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', 'Oxygen',
    'Ubuntu', 'Cantarell', 'Fira Sans', 'Droid Sans', 'Helvetica Neue',
    sans-serif;
  -webkit-font-smoothing: antialiased;
  -moz-osx-font-smoothing: grayscale;
}""",
    "src/components/ChatWindow.js": """import React from 'react';
import styled from 'styled-components';

// Chat window component implementation
export default function ChatWindow() {
  return <div>Chat Window</div>;
}""",
    "src/components/FileViewer.js": """import React from 'react';
import styled from 'styled-components';

// File viewer component implementation
export default function FileViewer() {
  return <div>File Viewer</div>;
}""",
    "src/components/Terminal.js": """import React from 'react';
import styled from 'styled-components';

// Terminal component implementation
export default function Terminal() {
  return <div>Terminal</div>;
}""",
    "src/services/fileService.js": "// File service implementation",
    "src/services/terminalService.js": "// Terminal service implementation",
    "public/index.html": """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Claude Web Interface</title>
  </head>
  <body>
    <noscript>You need to enable JavaScript to run this app.</noscript>
    <div id="root"></div>
  </body>
</html>""",
}

# Shown by the file browser's "recent" panel; fixed, not tracked.
RECENT_FILES = [
    FileEntry(name="FileViewer.js", type="file", path="src/components/FileViewer.js"),
    FileEntry(name="App.js", type="file", path="src/App.js"),
    FileEntry(name="index.js", type="file", path="src/index.js"),
    FileEntry(name="package.json", type="file", path="package.json"),
]


def create_seed_filesystem() -> VirtualFileSystem:
    """Build a fresh tree containing the seed project."""
    return VirtualFileSystem(directories=list(SEED_DIRECTORIES), files=dict(SEED_FILES))
