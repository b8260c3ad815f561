#!/usr/bin/env python3
"""
报告生成器 - 汇总演示输出
支持 text、markdown、json 格式
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from jinja2 import Template, TemplateError

from creational.exceptions import ReportError

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("text", "markdown", "json")


class ReportGenerator:
    """报告生成器"""

    def __init__(self, title: str = "Creational Patterns Demo Report"):
        self.title = title

    def _prepare_report_data(self, transcripts: Dict[str, List[str]]) -> Dict[str, Any]:
        """准备报告数据"""
        demos = [
            {"name": name, "lines": lines, "line_count": len(lines)}
            for name, lines in transcripts.items()
        ]
        return {
            "title": self.title,
            "generated_at": datetime.now().isoformat(timespec="seconds"),
            "demo_count": len(demos),
            "total_lines": sum(d["line_count"] for d in demos),
            "demos": demos,
        }

    def render(self, transcripts: Dict[str, List[str]], format_type: str = "text") -> str:
        """
        渲染报告内容

        Args:
            transcripts: {演示名称: 输出记录}
            format_type: text / markdown / json

        Raises:
            ReportError: 格式不支持或模板渲染失败
        """
        data = self._prepare_report_data(transcripts)

        if format_type == "json":
            return json.dumps(data, ensure_ascii=False, indent=2)
        if format_type == "markdown":
            source = self._get_markdown_template()
        elif format_type == "text":
            source = self._get_text_template()
        else:
            raise ReportError(f"不支持的报告格式: {format_type}", format=format_type)

        try:
            return Template(source, keep_trailing_newline=True).render(**data)
        except TemplateError as e:
            raise ReportError("模板渲染失败", format=format_type, cause=e) from e

    def save(
        self,
        transcripts: Dict[str, List[str]],
        filepath: str,
        format_type: Optional[str] = None,
    ) -> str:
        """
        渲染并写入文件

        Args:
            filepath: 目标路径
            format_type: 默认按扩展名推断 (.md -> markdown, .json -> json, 其他 -> text)

        Returns:
            写入的文件路径
        """
        if format_type is None:
            format_type = self._format_from_path(filepath)

        content = self.render(transcripts, format_type)

        directory = os.path.dirname(os.path.abspath(filepath))
        try:
            os.makedirs(directory, exist_ok=True)
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise ReportError(f"报告写入失败: {filepath}", format=format_type, cause=e) from e

        logger.info(f"报告已生成: {filepath}")
        return filepath

    @staticmethod
    def _format_from_path(filepath: str) -> str:
        ext = os.path.splitext(filepath)[1].lower()
        if ext in (".md", ".markdown"):
            return "markdown"
        if ext == ".json":
            return "json"
        return "text"

    def _get_text_template(self) -> str:
        """纯文本模板"""
        return '''{{ title }}
Generated at: {{ generated_at }}
Demos: {{ demo_count }} | Lines: {{ total_lines }}
{% for demo in demos %}
--- {{ demo.name }} ---
{% for line in demo.lines %}{{ line }}
{% endfor %}{% endfor %}'''

    def _get_markdown_template(self) -> str:
        """Markdown模板"""
        return '''# {{ title }}

- Generated at: {{ generated_at }}
- Demos: {{ demo_count }}
- Lines: {{ total_lines }}
{% for demo in demos %}
## {{ demo.name }}

```
{% for line in demo.lines %}{{ line }}
{% endfor %}```
{% endfor %}'''
