"""
UI strings and language detection.

Lookup falls back from the selected language to English and finally to the key
itself, so a missing translation never breaks a page.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    code: str
    name: str
    speech_locale: str


SUPPORTED_LANGUAGES = [
    Language("en", "English", "en-US"),
    Language("es", "Spanish", "es-ES"),
    Language("fr", "French", "fr-FR"),
    Language("de", "German", "de-DE"),
    Language("ja", "Japanese", "ja-JP"),
    Language("pt", "Portuguese", "pt-BR"),
]

DEFAULT_LANGUAGE = "en"

_BY_CODE = {lang.code: lang for lang in SUPPORTED_LANGUAGES}

TRANSLATIONS = {
    "en": {
        "app.title": "Cyber Legal Experts",
        "hero.title": "Your Cyber Legal Intelligence Hub",
        "hero.subtitle.1": "AI-powered legal insight for the digital age.",
        "hero.subtitle.2": "Where cyber law meets artificial intelligence.",
        "section.toolkit": "Our Toolkit",
        "section.toolkit.title": "AI-Powered Legal Intelligence",
        "section.toolkit.desc": "A suite of specialised tools that analyse, predict and explain the legal side of your digital world.",
        "footer.disclaimer": "Cyber Legal Experts. All information is for educational purposes and does not constitute legal advice.",
        "sidebar.language": "Language",
        "sidebar.mode": "Deep black mode",
        "sidebar.theme": "Theme",
        "common.back": "Back",
        "common.sources": "Sources",
        "common.download_pdf": "Download PDF report",
        "tool.home": "Home",
        "tool.home.desc": "Start page.",
        "tool.analyzer": "Document Analyzer",
        "tool.analyzer.desc": "Upload a legal document and uncover risks, inconsistencies and areas of concern.",
        "tool.summarizer": "Legal News Summarizer",
        "tool.summarizer.desc": "Get concise, source-linked summaries of the latest rulings and news on any topic.",
        "tool.copilot": "Legal Copilot",
        "tool.copilot.desc": "Describe your situation and receive a personalised, step-by-step action plan.",
        "tool.casedna": "Case DNA Analyzer",
        "tool.casedna.desc": "Extract timelines, entities, evidence patterns and liabilities from case material.",
        "tool.riskmeter": "Cyber Risk Meter",
        "tool.riskmeter.desc": "Score the cyber and legal risk of policies, contracts or your digital presence.",
        "tool.predictor": "Precedent Predictor",
        "tool.predictor.desc": "Predict likely outcomes, key statutes and strategies based on precedent.",
        "tool.sentry": "Smart Contract Sentry",
        "tool.sentry.desc": "Audit smart contract code for vulnerabilities and legal exposure.",
        "tool.knowledge": "Global Knowledge Hub",
        "tool.knowledge.desc": "Explore the cyber law landscape of major jurisdictions.",
        "tool.insights": "Cyber Law Insights",
        "tool.insights.desc": "Expert articles with AI summaries and audio playback.",
        "tool.templates": "Legal Templates",
        "tool.templates.desc": "Ready-to-use legal templates you can customise with AI.",
        "tool.engage": "Engagement Hub",
        "tool.engage.desc": "Voice consultation, quizzes and personalised newsletters.",
        "tool.chat": "Cylex AI Assistant",
        "tool.chat.desc": "Chat with Cylex, your proactive AI legal copilot.",
        "tool.expert_chat": "Ask a Cyber Law Expert",
        "tool.expert_chat.desc": "Streaming answers on cybersecurity laws and regulations.",
        "tool.lawdb": "Cyber Law Database",
        "tool.lawdb.desc": "Browse cyber laws by country with key points and penalties.",
        "tool.suitable_law": "Finding Suitable Law",
        "tool.suitable_law.desc": "Describe your scenario and find the laws that fit it.",
        "tool.experts": "Expert Directory",
        "tool.experts.desc": "Find cyber law experts near you.",
        "tool.labs": "AI Labs",
        "tool.labs.desc": "Experimental features we are working on.",
        "tool.about": "About Us",
        "tool.about.desc": "Who we are and the milestones that shaped cyber law and AI.",
        "chat.greeting": "Hello! I'm Cylex, your AI legal copilot. How can I help you with cyber law, data privacy or digital IP today?",
        "chat.typing": "Cylex is typing...",
        "chat.placeholder": "Ask about cyber law...",
        "chat.attach": "Attach an image or document",
        "chat.record": "Dictate your question",
        "chat.error": "Sorry, I encountered an error processing your request. The file might be too large or in an unsupported format.",
        "chat.saved": "Saved conversations",
        "chat.new": "New conversation",
        "chat.delete": "Delete conversation",
        "voice.title": "Live Voice Consultation",
        "voice.subtitle": "Speak with Cylex in real time.",
        "voice.back": "Back to Hub",
        "voice.listening": "I'm listening. Ask me anything about cyber law.",
        "voice.status.connected": "Connected",
        "voice.status.connecting": "Connecting...",
        "voice.status.error": "Connection error",
        "voice.status.disconnected": "Disconnected",
        "voice.btn.start": "Start Consultation",
        "voice.btn.end": "End Consultation",
        "voice.record": "Record your question",
        "voice.live.disclaimer": "Voice responses are AI-generated and do not constitute legal advice.",
        "riskmeter.title": "Cyber Risk Meter",
        "riskmeter.subtitle": "Paste a privacy policy, terms of service, contract or description of your digital presence.",
        "riskmeter.placeholder": "Paste the text to analyze...",
        "riskmeter.btn": "Assess Risk",
        "riskmeter.results": "Risk Assessment Results",
        "riskmeter.level": "Overall Risk Level",
        "riskmeter.risk": "Identified Risk",
        "riskmeter.rec": "Recommendation",
        "sentry.title": "Smart Contract Sentry",
        "sentry.subtitle": "AI audit of smart contracts for security vulnerabilities and legal risks.",
        "sentry.placeholder": "Paste your Solidity (or other) smart contract code here...",
        "sentry.btn": "Run Audit",
        "sentry.score": "Security Score",
        "sentry.legal": "Legal Risks",
        "sentry.vulns": "Vulnerabilities",
        "sentry.empty": "Paste contract code and run an audit to see the results here.",
        "summarizer.title": "Legal News Summarizer",
        "summarizer.subtitle": "Search-grounded summaries of the latest rulings and news.",
        "summarizer.placeholder": "e.g., GDPR fines for AI training data",
        "summarizer.btn": "Summarize",
        "summarizer.results": "Summary",
        "summarizer.sources": "Sources",
        "analyzer.title": "Document Analyzer",
        "analyzer.subtitle": "Upload a contract, policy or other legal document for an AI risk review.",
        "analyzer.upload": "Upload a document",
        "analyzer.btn": "Analyze Document",
        "analyzer.results": "Analysis",
        "copilot.title": "Legal Copilot",
        "copilot.subtitle": "Describe your situation and get a step-by-step legal action plan.",
        "copilot.placeholder": "Describe the incident, parties involved, and your desired outcome. For example: 'I am a small business owner and I suspect a former employee stole our client list...'",
        "copilot.btn": "Generate Action Plan",
        "copilot.results": "Your Action Plan",
        "copilot.disclaimer": "This AI-generated content is for informational purposes only and does not constitute legal advice. Consult a qualified lawyer for your specific situation.",
        "casedna.title": "Case DNA Analyzer",
        "casedna.subtitle": "Map the timeline, entities, evidence and liabilities hidden in your case material.",
        "casedna.placeholder": "Paste case details, emails, logs or incident reports...",
        "casedna.upload": "Upload a document",
        "casedna.or": "or paste the details above",
        "casedna.btn": "Analyze Case DNA",
        "casedna.map": "Case DNA Map",
        "casedna.timeline": "Timeline of Events",
        "casedna.entities": "Key Entities",
        "casedna.evidence": "Evidence Patterns",
        "casedna.liabilities": "Potential Legal Liabilities",
        "predictor.title": "Precedent Predictor",
        "predictor.subtitle": "Predict likely outcomes based on legal precedent.",
        "predictor.placeholder": "Describe the facts of the case, the jurisdiction and the claims involved...",
        "predictor.btn": "Predict Outcome",
        "predictor.dashboard": "Prediction Dashboard",
        "predictor.outcomes": "Predicted Outcomes",
        "predictor.sections": "Key Legal Sections",
        "predictor.strategies": "Suggested Strategies",
        "predictor.confidence": "Confidence",
        "predictor.likelihood": "Likelihood",
        "knowledge.overview": "Overview",
        "knowledge.back": "Back to regions",
        "knowledge.fetch": "Fetching the latest cyber law information...",
        "knowledge.sources": "Sources",
        "knowledge.disclaimer": "AI-generated briefing. Verify with official sources before relying on it.",
        "insights.title": "Cyber Law Insights",
        "insights.subtitle": "Analysis and commentary from our experts.",
        "insights.summarize": "AI Summary",
        "insights.listen": "Listen",
        "insights.ask": "Ask AI",
        "insights.read_more": "Read more",
        "quiz.generate": "Generate Quiz",
        "quiz.question": "Question",
        "quiz.next": "Next Question",
        "quiz.finish": "Finish Quiz",
        "quiz.correct": "Correct!",
        "quiz.incorrect": "Not quite.",
        "quiz.score": "Your score",
        "quiz.again": "Play Again",
        "news.region": "Region",
        "news.placeholder": "e.g., European Union",
        "news.btn": "Generate Newsletter",
        "lawdb.title": "Cyber Law Database",
        "lawdb.country": "Country",
        "lawdb.search": "Search by title",
        "lawdb.law_id": "Filter by Law ID (Exact Match)",
        "lawdb.key_points": "Key Points",
        "lawdb.penalties": "Penalties",
        "lawdb.empty": "No laws found with the applied filters.",
        "suitable.prompt": "Describe your scenario (what you plan to do, your situation, etc.):",
        "suitable.btn": "Find Suitable Laws",
        "suitable.advice": "Advice",
        "experts.title": "Find Cyber Law Experts",
        "experts.location": "Location",
        "experts.specialization": "Specialization",
        "experts.reviews": "reviews",
        "experts.contact": "Contact",
        "expert_chat.title": "Ask a Cyber Law Expert",
        "expert_chat.placeholder": "Ask about cybersecurity laws and regulations...",
        "expert_chat.clear": "Clear chat",
        "knowledge.title": "Global Knowledge Hub",
        "knowledge.subtitle": "Select a region to get an up-to-date cyber law briefing.",
        "region.eu": "European Union",
        "region.us": "United States",
        "region.br": "Brazil",
        "region.in": "India",
        "region.jp": "Japan",
        "region.au": "Australia",
        "templates.title": "Legal Templates",
        "templates.subtitle": "Start from a proven template and tailor it with Cylex.",
        "templates.all": "All",
        "templates.category": "Category",
        "templates.copy": "Copy",
        "templates.copied": "Copied!",
        "templates.customize": "Customize with AI",
        "labs.title": "AI Labs",
        "labs.subtitle": "A glimpse into the future of legal technology.",
        "labs.status.experimental": "Experimental",
        "labs.status.development": "In Development",
        "labs.status.concept": "Concept",
        "labs.coming_soon": "Coming soon",
        "about.title": "About Cyber Legal Experts",
        "about.desc": "Cyber Legal Experts brings together seasoned cyber law practitioners and AI engineers to make the legal side of technology understandable, actionable and accessible.",
        "about.timeline": "Milestones in Cyber Law and AI",
        "engage.title": "Engagement Hub",
        "engage.subtitle": "Interactive ways to learn about and stay ahead in cyber law.",
        "engage.voice.title": "Voice Consultation",
        "engage.voice.desc": "Talk to Cylex in a live voice session.",
        "engage.quiz.title": "Cyber Law Quiz",
        "engage.quiz.desc": "Test your knowledge with an AI-generated quiz.",
        "engage.news.title": "Newsletter Generator",
        "engage.news.desc": "Get a personalised legal newsletter for your region.",
        "tour.welcome.title": "Welcome to Cyber Legal Experts",
        "tour.welcome.desc": "Take a quick tour of the AI tools that help you navigate cyber law.",
        "tour.tools.title": "Explore the toolkit",
        "tour.tools.desc": "Every tool has its own page in the sidebar, from document analysis to precedent prediction.",
        "tour.settings.title": "Make it yours",
        "tour.settings.desc": "Switch language and colour mode from the sidebar at any time.",
        "tour.chat.title": "Ask Cylex",
        "tour.chat.desc": "Open the Cylex assistant whenever you need a legal copilot.",
        "tour.next": "Next",
        "tour.skip": "Skip tour",
        "tour.finish": "Get started",
        "templates.cat.ip": "Intellectual Property",
        "templates.cat.privacy": "Data Privacy",
        "templates.cat.contracts": "Contracts & Agreements",
    },
    "es": {
        "hero.title": "Tu centro de inteligencia jurídica Cyber",
        "hero.subtitle.1": "Conocimiento jurídico impulsado por IA para la era digital.",
        "hero.subtitle.2": "Donde el derecho cibernético se une a la inteligencia artificial.",
        "section.toolkit": "Nuestras herramientas",
        "section.toolkit.title": "Inteligencia jurídica impulsada por IA",
        "footer.disclaimer": "Cyber Legal Experts. Toda la información es educativa y no constituye asesoramiento jurídico.",
        "sidebar.language": "Idioma",
        "sidebar.mode": "Modo negro profundo",
        "tool.analyzer": "Analizador de documentos",
        "tool.summarizer": "Resumen de noticias legales",
        "tool.copilot": "Copiloto legal",
        "tool.casedna": "Analizador de ADN del caso",
        "tool.riskmeter": "Medidor de riesgo cibernético",
        "tool.predictor": "Predictor de precedentes",
        "tool.knowledge": "Centro de conocimiento global",
        "tool.templates": "Plantillas legales",
        "chat.greeting": "¡Hola! Soy Cylex, tu copiloto legal con IA. ¿En qué puedo ayudarte hoy?",
        "chat.typing": "Cylex está escribiendo...",
        "region.eu": "Unión Europea",
        "region.us": "Estados Unidos",
        "region.br": "Brasil",
        "region.in": "India",
        "region.jp": "Japón",
        "region.au": "Australia",
    },
    "fr": {
        "hero.title": "Votre centre d'intelligence juridique Cyber",
        "hero.subtitle.1": "L'expertise juridique propulsée par l'IA pour l'ère numérique.",
        "hero.subtitle.2": "Là où le droit du numérique rencontre l'intelligence artificielle.",
        "section.toolkit": "Nos outils",
        "section.toolkit.title": "Intelligence juridique propulsée par l'IA",
        "footer.disclaimer": "Cyber Legal Experts. Informations fournies à titre éducatif, sans valeur de conseil juridique.",
        "sidebar.language": "Langue",
        "sidebar.mode": "Mode noir profond",
        "tool.analyzer": "Analyseur de documents",
        "tool.summarizer": "Synthèse d'actualités juridiques",
        "tool.copilot": "Copilote juridique",
        "tool.riskmeter": "Indicateur de risque cyber",
        "tool.predictor": "Prédicteur de jurisprudence",
        "tool.templates": "Modèles juridiques",
        "chat.greeting": "Bonjour ! Je suis Cylex, votre copilote juridique IA. Comment puis-je vous aider ?",
        "chat.typing": "Cylex écrit...",
        "region.eu": "Union européenne",
        "region.us": "États-Unis",
        "region.br": "Brésil",
        "region.in": "Inde",
        "region.jp": "Japon",
        "region.au": "Australie",
    },
    "de": {
        "hero.title": "Ihr Cyber Legal Intelligence Hub",
        "hero.subtitle.1": "KI-gestützte Rechtseinblicke für das digitale Zeitalter.",
        "hero.subtitle.2": "Wo Cyberrecht auf künstliche Intelligenz trifft.",
        "section.toolkit": "Unsere Werkzeuge",
        "section.toolkit.title": "KI-gestützte Rechtsintelligenz",
        "footer.disclaimer": "Cyber Legal Experts. Alle Informationen dienen Bildungszwecken und stellen keine Rechtsberatung dar.",
        "sidebar.language": "Sprache",
        "sidebar.mode": "Tiefschwarzer Modus",
        "tool.analyzer": "Dokumentenanalyse",
        "tool.copilot": "Rechts-Copilot",
        "tool.riskmeter": "Cyber-Risikometer",
        "tool.templates": "Rechtsvorlagen",
        "chat.greeting": "Hallo! Ich bin Cylex, Ihr KI-Rechts-Copilot. Wie kann ich Ihnen heute helfen?",
        "chat.typing": "Cylex schreibt...",
        "region.eu": "Europäische Union",
        "region.us": "Vereinigte Staaten",
        "region.br": "Brasilien",
        "region.in": "Indien",
        "region.jp": "Japan",
        "region.au": "Australien",
    },
    "ja": {
        "hero.title": "あなたのCyber法務インテリジェンスハブ",
        "hero.subtitle.1": "デジタル時代のためのAI法務インサイト。",
        "hero.subtitle.2": "サイバー法と人工知能が出会う場所。",
        "section.toolkit": "ツールキット",
        "footer.disclaimer": "Cyber Legal Experts. すべての情報は教育目的であり、法的助言ではありません。",
        "sidebar.language": "言語",
        "tool.analyzer": "文書アナライザー",
        "tool.riskmeter": "サイバーリスクメーター",
        "chat.greeting": "こんにちは！AI法務コパイロットのCylexです。今日はどのようにお手伝いできますか？",
        "region.eu": "欧州連合",
        "region.us": "アメリカ合衆国",
        "region.br": "ブラジル",
        "region.in": "インド",
        "region.jp": "日本",
        "region.au": "オーストラリア",
    },
    "pt": {
        "hero.title": "Seu centro de inteligência jurídica Cyber",
        "hero.subtitle.1": "Insights jurídicos com IA para a era digital.",
        "hero.subtitle.2": "Onde o direito cibernético encontra a inteligência artificial.",
        "section.toolkit": "Nossas ferramentas",
        "footer.disclaimer": "Cyber Legal Experts. Todas as informações são educativas e não constituem aconselhamento jurídico.",
        "sidebar.language": "Idioma",
        "tool.analyzer": "Analisador de documentos",
        "tool.copilot": "Copiloto jurídico",
        "chat.greeting": "Olá! Sou o Cylex, seu copiloto jurídico com IA. Como posso ajudar hoje?",
        "region.eu": "União Europeia",
        "region.us": "Estados Unidos",
        "region.br": "Brasil",
        "region.in": "Índia",
        "region.jp": "Japão",
        "region.au": "Austrália",
    },
}


def get_language(code):
    return _BY_CODE.get(code, _BY_CODE[DEFAULT_LANGUAGE])


def language_name(code):
    return get_language(code).name


def speech_locale(code):
    return get_language(code).speech_locale


def translate(key, language=DEFAULT_LANGUAGE):
    table = TRANSLATIONS.get(language, {})
    if key in table:
        return table[key]
    return TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key)


def _parse_accept_language(header):
    """Yield primary language tags ordered by their q weight."""
    entries = []
    for position, item in enumerate((header or "").split(",")):
        item = item.strip()
        if not item:
            continue
        tag, _, params = item.partition(";")
        weight = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                weight = float(params[2:])
            except ValueError:
                weight = 0.0
        if weight <= 0:
            continue
        entries.append((-weight, position, tag.strip().split("-")[0].lower()))
    for _, _, primary in sorted(entries):
        yield primary


def detect_user_language(accept_language):
    for primary in _parse_accept_language(accept_language):
        if primary in _BY_CODE:
            return primary
    return DEFAULT_LANGUAGE
