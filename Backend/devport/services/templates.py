# devport/services/templates.py
"""
Starter content applied at creation time.

- Project templates: a fixed file set per DevStudio template name.
- Portfolio templates: a catalogue of CreativePort layouts, each an
  ordered list of section types seeded onto the portfolio's home page.
"""
import copy
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from devport.core.constants import FileType, SectionType
from devport.core.logging import log
from devport.models import (
    FileCreate,
    PageCreate,
    Portfolio,
    Project,
    SectionCreate,
)
from devport.storage import PlaygroundStorage, PortfolioStorage


# ═══════════════════════════════════════════════════════════════════════════
# PROJECT TEMPLATES
# ═══════════════════════════════════════════════════════════════════════════

REACT_APP = "React App"
HTML_CSS_JS = "HTML/CSS/JS"

_REACT_APP_JS = """import React from 'react';
import './App.css';

function App() {
  return (
    <div className="App">
      <header className="App-header">
        <h1>Welcome to My Portfolio</h1>
        <p>
          Full-stack developer passionate about creating
          amazing web experiences.
        </p>
        <div className="skills">
          <span className="skill">React</span>
          <span className="skill">Node.js</span>
          <span className="skill">Python</span>
        </div>
      </header>
    </div>
  );
}

export default App;"""

_REACT_APP_CSS = """.App {
  text-align: center;
}

.App-header {
  background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
  padding: 60px 20px;
  color: white;
  min-height: 100vh;
  display: flex;
  flex-direction: column;
  align-items: center;
  justify-content: center;
}

.App-header h1 {
  font-size: 2.5rem;
  margin-bottom: 1rem;
}

.App-header p {
  font-size: 1.1rem;
  margin-bottom: 2rem;
  max-width: 600px;
  line-height: 1.6;
}

.skills {
  display: flex;
  gap: 1rem;
  flex-wrap: wrap;
  justify-content: center;
}

.skill {
  background: rgba(255, 255, 255, 0.2);
  padding: 0.5rem 1rem;
  border-radius: 25px;
  font-size: 0.9rem;
  backdrop-filter: blur(10px);
}"""

_REACT_INDEX_JS = """import React from 'react';
import ReactDOM from 'react-dom/client';
import App from './App';

const root = ReactDOM.createRoot(document.getElementById('root'));
root.render(<App />);"""

_REACT_INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>React App</title>
  </head>
  <body>
    <div id="root"></div>
  </body>
</html>"""

_REACT_PACKAGE_JSON = """{
  "name": "react-app",
  "version": "1.0.0",
  "dependencies": {
    "react": "^18.2.0",
    "react-dom": "^18.2.0"
  },
  "scripts": {
    "start": "react-scripts start",
    "build": "react-scripts build"
  }
}"""

_WEB_INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>My Web Project</title>
    <link rel="stylesheet" href="style.css">
</head>
<body>
    <div class="container">
        <h1>Welcome to My Web Project</h1>
        <p>This is a simple HTML, CSS, and JavaScript project.</p>
        <button onclick="showMessage()">Click me!</button>
    </div>
    <script src="script.js"></script>
</body>
</html>"""

_WEB_STYLE_CSS = """body {
    font-family: Arial, sans-serif;
    margin: 0;
    padding: 0;
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    color: white;
    min-height: 100vh;
    display: flex;
    align-items: center;
    justify-content: center;
}

.container {
    text-align: center;
    padding: 2rem;
    background: rgba(255, 255, 255, 0.1);
    border-radius: 15px;
    backdrop-filter: blur(10px);
}

h1 {
    font-size: 2.5rem;
    margin-bottom: 1rem;
}

p {
    font-size: 1.1rem;
    margin-bottom: 2rem;
}

button {
    background: rgba(255, 255, 255, 0.2);
    border: none;
    padding: 1rem 2rem;
    border-radius: 25px;
    color: white;
    font-size: 1rem;
    cursor: pointer;
    transition: all 0.3s ease;
}

button:hover {
    background: rgba(255, 255, 255, 0.3);
    transform: translateY(-2px);
}"""

_WEB_SCRIPT_JS = """function showMessage() {
    alert('Hello from DevStudio! 🚀');
}

// Add some interactive features
document.addEventListener('DOMContentLoaded', function() {
    console.log('Web project loaded successfully!');

    // Add click animation to button
    const button = document.querySelector('button');
    button.addEventListener('click', function() {
        this.style.transform = 'scale(0.95)';
        setTimeout(() => {
            this.style.transform = 'scale(1)';
        }, 150);
    });
});"""


def _file(path: str, content: str = "") -> FileCreate:
    return FileCreate(name=path.rsplit("/", 1)[-1], path=path, type=FileType.FILE, content=content)


def _folder(path: str) -> FileCreate:
    return FileCreate(name=path.rsplit("/", 1)[-1], path=path, type=FileType.FOLDER, content="")


PROJECT_TEMPLATES: Dict[str, List[FileCreate]] = {
    REACT_APP: [
        _folder("/src"),
        _file("/src/App.js", _REACT_APP_JS),
        _file("/src/App.css", _REACT_APP_CSS),
        _file("/src/index.js", _REACT_INDEX_JS),
        _file("/public/index.html", _REACT_INDEX_HTML),
        _file("/package.json", _REACT_PACKAGE_JSON),
    ],
    HTML_CSS_JS: [
        _file("/index.html", _WEB_INDEX_HTML),
        _file("/style.css", _WEB_STYLE_CSS),
        _file("/script.js", _WEB_SCRIPT_JS),
    ],
}


def default_files(template: str) -> List[FileCreate]:
    """
    The file set a new project of `template` starts with.

    Every template gets a README; unknown templates get only the README.
    All seeded entries are root-level (no parent id).
    """
    readme = _file(
        "/README.md",
        f"# {template} Project\n\nThis is a new {template} project created with DevStudio.",
    )
    extra = PROJECT_TEMPLATES.get(template, [])
    return [readme] + [f.model_copy() for f in extra]


async def seed_project_files(storage: PlaygroundStorage, project: Project) -> int:
    files = default_files(project.template)
    for f in files:
        await storage.create_file(project.id, f)
    log("TEMPLATES", f"Seeded {len(files)} files from '{project.template}'", project_id=project.id)
    return len(files)


# ═══════════════════════════════════════════════════════════════════════════
# PORTFOLIO TEMPLATES
# ═══════════════════════════════════════════════════════════════════════════

class PortfolioTemplate(BaseModel):
    id: str
    name: str
    description: str
    category: str
    preview: str
    sections: List[SectionType]


PORTFOLIO_TEMPLATES: List[PortfolioTemplate] = [
    PortfolioTemplate(
        id="minimal",
        name="Minimal Studio",
        description="Clean and elegant design perfect for photographers",
        category="Photography",
        preview="https://images.unsplash.com/photo-1542744173-8e7e53415bb0?ixlib=rb-4.0.3&w=400&h=300&fit=crop",
        sections=[SectionType.HERO, SectionType.GALLERY, SectionType.TEXT, SectionType.CONTACT],
    ),
    PortfolioTemplate(
        id="creative",
        name="Creative Canvas",
        description="Bold layouts for artists and creative professionals",
        category="Art",
        preview="https://images.unsplash.com/photo-1513475382585-d06e58bcb0e0?ixlib=rb-4.0.3&w=400&h=300&fit=crop",
        sections=[SectionType.HERO, SectionType.GALLERY, SectionType.TEXT, SectionType.VIDEO, SectionType.CONTACT],
    ),
    PortfolioTemplate(
        id="professional",
        name="Design Pro",
        description="Modern layouts for UI/UX designers and digital professionals",
        category="Design",
        preview="https://images.unsplash.com/photo-1561070791-2526d30994b5?ixlib=rb-4.0.3&w=400&h=300&fit=crop",
        sections=[SectionType.HERO, SectionType.GALLERY, SectionType.TEXT, SectionType.CONTACT],
    ),
    PortfolioTemplate(
        id="architecture",
        name="Architecture Hub",
        description="Professional layouts for architects and planners",
        category="Architecture",
        preview="https://images.unsplash.com/photo-1486406146926-c627a92ad1ab?ixlib=rb-4.0.3&w=400&h=300&fit=crop",
        sections=[SectionType.HERO, SectionType.GALLERY, SectionType.TEXT, SectionType.CONTACT],
    ),
    PortfolioTemplate(
        id="fashion",
        name="Fashion Focus",
        description="Elegant templates for fashion and lifestyle photography",
        category="Photography",
        preview="https://images.unsplash.com/photo-1445205170230-053b83016050?ixlib=rb-4.0.3&w=400&h=300&fit=crop",
        sections=[SectionType.HERO, SectionType.GALLERY, SectionType.TEXT, SectionType.CONTACT],
    ),
    PortfolioTemplate(
        id="tech",
        name="Tech Startup",
        description="Modern layouts for digital products and startups",
        category="Design",
        preview="https://images.unsplash.com/photo-1460925895917-afdab827c52f?ixlib=rb-4.0.3&w=400&h=300&fit=crop",
        sections=[SectionType.HERO, SectionType.TEXT, SectionType.GALLERY, SectionType.CONTACT],
    ),
]

# Placeholder copy the section renderer shows until the owner edits it
SECTION_DEFAULT_CONTENT: Dict[SectionType, Dict[str, Any]] = {
    SectionType.HERO: {"title": "Your Name", "subtitle": "Your Title", "description": ""},
    SectionType.GALLERY: {"title": "Gallery", "images": []},
    SectionType.TEXT: {"title": "About", "content": ""},
    SectionType.CONTACT: {"title": "Get in Touch", "message": "", "email": "", "phone": ""},
    SectionType.VIDEO: {"title": "Showreel", "videoUrl": "", "description": ""},
}


def get_portfolio_template(template_id: str) -> Optional[PortfolioTemplate]:
    for template in PORTFOLIO_TEMPLATES:
        if template.id == template_id:
            return template
    return None


def starter_sections(template_id: str) -> List[SectionCreate]:
    template = get_portfolio_template(template_id)
    if template is None:
        return []
    return [
        SectionCreate(type=section_type, content=copy.deepcopy(SECTION_DEFAULT_CONTENT[section_type]), order=index)
        for index, section_type in enumerate(template.sections)
    ]


async def seed_portfolio(storage: PortfolioStorage, portfolio: Portfolio) -> None:
    """Create the home page and the template's starter sections."""
    home = await storage.create_page(
        portfolio.id,
        PageCreate(title="Home", slug="", is_home_page=True, order=0),
    )
    sections = starter_sections(portfolio.template)
    for section in sections:
        await storage.create_section(home.id, section)
    log("TEMPLATES", f"Seeded home page {home.id} with {len(sections)} sections from '{portfolio.template}'")
