# talentai/cv/extractors.py
import re
from io import BytesIO
from pdfminer.high_level import extract_text as pdf_extract_text
from docx import Document

# Whitelisted skills/hints (lowercase)
_SKILL_HINTS = {
    "python","pandas","numpy","scikit-learn","sklearn","pytorch","tensorflow",
    "sql","mysql","postgres","postgresql","spark","airflow","dbt",
    "aws","azure","gcp","docker","kubernetes","linux","git","bash",
    "javascript","typescript","node.js","react","java","c++","scala",
    "nlp","llm","fastapi","flask","django","s3","pyspark","excel","tableau",
    "opencv","keras","hadoop","redshift","snowflake","bigquery","terraform",
}

# alias -> canonical
_ALIASES = {
    "py": "python", "python3": "python", "tf": "tensorflow",
    "js": "javascript", "nodejs": "node.js", "node": "node.js", "ts": "typescript",
    "postgres": "postgresql", "sklearn": "scikit-learn", "k8s": "kubernetes",
}

_DEGREE_PAT = re.compile(r"\b(B\.?Tech|B\.?E\.?|BSc|BS|BA|MSc|MS|MA|M\.?Tech|MBA|PhD)\b", re.I)
_YEARS_PAT  = re.compile(r"(\b\d{1,2})\+?\s*(?:years|yrs)\s*(?:of)?\s*(?:experience|exp)?", re.I)
_ORG_PAT    = re.compile(r"\b(University of [A-Z][A-Za-z]+(?:\s[A-Z][A-Za-z]+)*|[A-Z][A-Za-z]+(?:\s[A-Z][A-Za-z]+)* University)\b")

_EMAIL_PAT  = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_PHONE_PAT  = re.compile(r"(\+?\d[\d\-\s\(\)]{7,}\d)")
_URL_PAT    = re.compile(r"https?://\S+")
_TOKEN_SPLIT = re.compile(r"[^A-Za-z0-9\.\+\#\-]+")


def _extract_text_from_pdf(data: bytes) -> str:
    with BytesIO(data) as bio:
        return pdf_extract_text(bio) or ""

def _extract_text_from_docx(data: bytes) -> str:
    with BytesIO(data) as bio:
        doc = Document(bio)
    return "\n".join(p.text for p in doc.paragraphs)

def sniff_and_extract_text(filename: str, data: bytes) -> str:
    name = filename.lower()
    if name.endswith(".pdf"):
        return _extract_text_from_pdf(data)
    if name.endswith(".docx"):
        return _extract_text_from_docx(data)
    return data.decode("utf-8", "ignore")


def _scrub_pii(text: str) -> str:
    text = _EMAIL_PAT.sub(" [email] ", text)
    text = _PHONE_PAT.sub(" [phone] ", text)
    text = _URL_PAT.sub(" [url] ", text)
    return text

def extract_skills(text: str) -> list[str]:
    """Known skills in order of first appearance, aliases folded, de-duplicated."""
    out: list[str] = []
    seen: set[str] = set()
    for raw in _TOKEN_SPLIT.split(_scrub_pii(text).lower()):
        t = raw.strip(".-")
        t = _ALIASES.get(t, t)
        if t in _SKILL_HINTS:
            if t not in seen:
                seen.add(t)
                out.append(t)
    return out

def extract_contacts(text: str) -> dict:
    email = _EMAIL_PAT.search(text)
    phone = _PHONE_PAT.search(text)
    return {
        "email": email.group(0) if email else None,
        "phone": phone.group(0).strip() if phone else None,
    }

def extract_resume_entities(text: str) -> dict:
    text_scrub = _scrub_pii(text)
    degrees = sorted({d for d in _DEGREE_PAT.findall(text_scrub)})
    orgs = sorted({o.strip() for o in _ORG_PAT.findall(text_scrub)})
    m = _YEARS_PAT.search(text_scrub)
    yrs = float(m.group(1)) if m else 0.0

    return {
        "skills": extract_skills(text),
        "education": [{"degree": d} for d in degrees],
        "organizations": orgs,
        "experience_years": yrs,
    }
