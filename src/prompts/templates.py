"""Static prompt templates. Pure data: nothing here touches the database."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from mcp.types import PromptArgument


@dataclass(frozen=True)
class PromptTemplate:
    name: str
    description: str
    text: str
    arguments: List[PromptArgument] = field(default_factory=list)
    title: Optional[str] = None

    def render(self, arguments: Dict[str, str]) -> str:
        return self.text.format(**arguments)

    def render_title(self, arguments: Dict[str, str]) -> str:
        return (self.title or self.description).format(**arguments)


ANALYZE_TABLE = PromptTemplate(
    name="analyze_table",
    description="Analyze a specific table",
    title="Analysis of table {table_name}",
    arguments=[
        PromptArgument(name="table_name", description="Name of the table to analyze", required=True),
    ],
    text=(
        'Please analyze the table "{table_name}".\n'
        "\n"
        "1. First, describe the structure of the table\n"
        "2. Show some sample data\n"
        "3. Compute basic statistics (record count)\n"
        "4. Identify possible problems or optimization opportunities"
    ),
)

FIND_LARGE_TABLES = PromptTemplate(
    name="find_large_tables",
    description="Find the tables with the most records",
    text=(
        "List all tables of the current database and show me:\n"
        "\n"
        "1. The number of records in each table\n"
        "2. Sort them by record count (largest to smallest)\n"
        "3. Identify the 5 largest tables\n"
        "4. Suggest optimization strategies if needed"
    ),
)

DATABASE_OVERVIEW = PromptTemplate(
    name="database_overview",
    description="Overview of the database",
    text=(
        "Give me a complete overview of the database:\n"
        "\n"
        "1. List all available databases\n"
        "2. For the current database, show all tables\n"
        "3. Identify relationships between tables (foreign keys)\n"
        "4. Suggest structural improvements if applicable"
    ),
)

PROMPT_TEMPLATES = [ANALYZE_TABLE, FIND_LARGE_TABLES, DATABASE_OVERVIEW]
