import json
import pandas as pd
from datetime import datetime
from xml.sax.saxutils import escape
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer, PageBreak
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from typing import Any, Dict, List
from .records import JasonFormat, NanoCoderResult, NanoPromptResult
import logging

logger = logging.getLogger(__name__)


def _row(record) -> Dict[str, Any]:
    if isinstance(record, NanoPromptResult):
        return {
            "mode": "prompt",
            "original": record.original_prompt,
            "rewritten": record.nano_prompt,
            "score": record.accuracy_score,
            "optimizations": len(record.optimizations_applied),
            "details": "; ".join(record.optimizations_applied),
            "tips": "; ".join(record.performance_tips),
        }
    if isinstance(record, NanoCoderResult):
        return {
            "mode": "technical",
            "original": record.original_prompt,
            "rewritten": record.nano_coder_prompt,
            "score": record.accuracy_score,
            "optimizations": len(record.technical_specifications),
            "details": "; ".join(record.technical_specifications + record.code_context),
            "tips": "; ".join(record.performance_tips),
        }
    if isinstance(record, JasonFormat):
        prompt = json.loads(record.jason_text).get("prompt", "")
        return {
            "mode": "general",
            "original": prompt,
            "rewritten": prompt,
            "score": None,
            "optimizations": 0,
            "details": f"style={record.style}; mood={record.mood}; characters={', '.join(record.characters)}",
            "tips": "",
        }
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


class ReportGenerator:
    def __init__(self, records: List[Any]):
        self.records = records
        # Flatten the data for DataFrame
        self.df = pd.DataFrame(
            [_row(r) for r in records],
            columns=["mode", "original", "rewritten", "score", "optimizations", "details", "tips"]
        )

    def summary(self) -> Dict[str, Any]:
        scores = self.df["score"].dropna()
        return {
            "count": int(len(self.df)),
            "average_score": round(float(scores.mean()), 2) if len(scores) else None,
            "min_score": int(scores.min()) if len(scores) else None,
            "max_score": int(scores.max()) if len(scores) else None,
            "average_optimizations": round(float(self.df["optimizations"].mean()), 2) if len(self.df) else 0.0,
        }

    def generate_excel(self, output_path: str):
        self.df.to_excel(output_path, index=False)
        logger.info(f"Excel report saved to {output_path}")

    def generate_pdf(self, output_path: str, metadata: Dict[str, str] = None):
        doc = SimpleDocTemplate(
            output_path,
            pagesize=A4,
            rightMargin=2*cm, leftMargin=2*cm,
            topMargin=2*cm, bottomMargin=2*cm
        )
        elements = []

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            'CustomTitle',
            parent=styles['Title'],
            fontSize=24,
            leading=30,
            alignment=0, # Left
            textColor=colors.HexColor('#2F5597')
        )

        section_title_style = ParagraphStyle(
            'SectionTitle',
            parent=styles['Heading2'],
            fontSize=16,
            textColor=colors.HexColor('#2F5597'),
            spaceBefore=12,
            spaceAfter=6
        )

        normal_style = ParagraphStyle(
            'CustomNormal',
            parent=styles['Normal'],
            fontSize=10,
            leading=14
        )

        # --- Title & Metadata ---
        elements.append(Paragraph("Prompt Optimization Report", title_style))
        source = metadata.get("source", "Batch input") if metadata else "Batch input"
        elements.append(Paragraph(escape(source), ParagraphStyle('SubTitle', parent=normal_style, fontSize=14, textColor=colors.grey)))
        elements.append(Spacer(1, 1*cm))

        summary = self.summary()
        mode = metadata.get("mode", "mixed") if metadata else "mixed"
        date_str = datetime.now().strftime("%Y-%m-%d %H:%M")
        meta_data = [
            [f"Mode: {mode}", f"Date: {date_str}"],
            [f"Prompts: {summary['count']}", f"Average score: {summary['average_score'] if summary['average_score'] is not None else '-'}"]
        ]
        meta_table = Table(meta_data, colWidths=[8*cm, 8*cm])
        meta_table.setStyle(TableStyle([
            ('FONTSIZE', (0, 0), (-1, -1), 10),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('TEXTCOLOR', (0, 0), (-1, -1), colors.black),
        ]))
        elements.append(meta_table)
        elements.append(PageBreak())

        # --- Per prompt ---
        elements.append(Paragraph("Prompt Details", section_title_style))

        for i, r in self.df.iterrows():
            elements.append(Paragraph(f"Prompt {i+1}", ParagraphStyle('SegTitle', parent=normal_style, fontSize=12, textColor=colors.HexColor('#2F5597'))))

            comp_data = [
                ["Field", "Value"],
                ["Original", Paragraph(escape(r["original"]), normal_style)],
                ["Rewritten", Paragraph(escape(r["rewritten"]), normal_style)],
                ["Score", "-" if pd.isna(r["score"]) else f"{int(r['score'])}"],
                ["Applied", Paragraph(escape(r["details"]), normal_style)],
                ["Tips", Paragraph(escape(r["tips"]), normal_style)],
            ]
            comp_table = Table(comp_data, colWidths=[3*cm, 13*cm])
            comp_table.setStyle(TableStyle([
                ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#0070C0')),
                ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
                ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
                ('VALIGN', (0, 0), (-1, -1), 'TOP'),
                ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
            ]))
            elements.append(comp_table)
            elements.append(Spacer(1, 12))

        doc.build(elements)
        logger.info(f"PDF report saved to {output_path}")
