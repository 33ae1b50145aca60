"""Fixed content shown by the pages and used to seed the laws collection."""

FIXED_TAGLINES = [
    "Defend. Detect. Decide.",
    "Navigating the Digital Legal Frontier.",
    "Cybersecurity Law, Intelligently Deciphered.",
]

THREAT_TICKER_ITEMS = [
    "Active Phishing Campaign Targeting Financial Institutions Detected.",
    "New Zero-Day Exploit Found in Widely Used Server Software.",
    "Ransomware Attack Disrupts Major Healthcare Provider.",
    "Data Breach Exposes Personal Information of 1M+ Users.",
    "Warning Issued for State-Sponsored Espionage Malware.",
]

CASE_INSIGHTS_TICKER_ITEMS = [
    "Supreme Court Rules on Digital Privacy in Cloud Computing.",
    "New Precedent Set for IP Theft in a Cross-Border Data Case.",
    "Landmark GDPR Fine Issued for Non-Compliance.",
    "Analysis: Recent Ruling on AI-generated Content Copyright.",
    "Legal Tech Trends: Predictive Analytics in Litigation.",
]

# (localization key, region name sent to the model, flag)
REGIONS = [
    ("region.eu", "European Union", "🇪🇺"),
    ("region.us", "United States", "🇺🇸"),
    ("region.br", "Brazil", "🇧🇷"),
    ("region.in", "India", "🇮🇳"),
    ("region.jp", "Japan", "🇯🇵"),
    ("region.au", "Australia", "🇦🇺"),
]

ARTICLES = [
    {
        "id": 1,
        "title": "The GDPR Impact on AI Development: A Two-Year Retrospective",
        "author": "Dr. Evelyn Reed",
        "date": "October 26, 2023",
        "snippet": "Examining the complex interplay between the EU's General Data Protection Regulation and the "
                   "burgeoning field of artificial intelligence, highlighting compliance challenges and emerging "
                   "best practices.",
        "content": "Two years after its full implementation, the GDPR continues to shape the digital landscape. For "
                   "AI developers, the regulation presents a unique set of hurdles. The principles of data "
                   "minimization and purpose limitation often conflict with the data-hungry nature of machine "
                   "learning models. This article explores several key court rulings that have clarified the scope "
                   "of 'legitimate interest' as a legal basis for processing data for AI training. We also delve "
                   "into the technical solutions, such as federated learning and differential privacy, that "
                   "companies are adopting to build GDPR-compliant AI systems. The concept of 'the right to "
                   "explanation' remains a significant legal and technical challenge, and we analyze the evolving "
                   "interpretations from various Data Protection Authorities across the EU.",
    },
    {
        "id": 2,
        "title": "Digital Forensics in the Cloud: Navigating Cross-Border Data Laws",
        "author": "Marcus Thorne",
        "date": "October 15, 2023",
        "snippet": "A deep dive into the legal complexities of conducting digital forensic investigations when data "
                   "is stored across multiple jurisdictions in the cloud.",
        "content": "Cloud computing has revolutionized data storage, but it has created a nightmare for digital "
                   "forensic investigators. When a corporation's data is spread across servers in Ireland, Germany, "
                   "and the United States, which jurisdiction's laws apply? The U.S. CLOUD Act was a significant "
                   "attempt to address this, but it often clashes with data sovereignty laws in other nations. This "
                   "piece examines the mutual legal assistance treaties (MLATs) and their slow, often cumbersome "
                   "process. We will present a case study of a major corporate espionage investigation that "
                   "required navigating these conflicting legal frameworks, highlighting the critical importance of "
                   "chain of custody and data integrity in a virtualized environment. Finally, we propose a "
                   "framework for pre-incident planning that can help organizations prepare for the inevitability "
                   "of cross-border digital investigations.",
    },
    {
        "id": 3,
        "title": "Copyright and AI-Generated Art: Who Owns the Masterpiece?",
        "author": "Juliana Chen",
        "date": "September 30, 2023",
        "snippet": "The rise of generative AI models like DALL-E 2 and Midjourney has sparked a fierce debate in "
                   "copyright law. Who is the author: the user, the AI, or the AI's creator?",
        "content": "Recent decisions from the U.S. Copyright Office have consistently denied copyright protection to "
                   "works generated solely by AI, stating that human authorship is a prerequisite. However, the "
                   "line is blurring. What level of human input in prompting and curating AI output is sufficient "
                   "to qualify as authorship? This article analyzes the 'work for hire' doctrine and its potential "
                   "application to AI systems. We also explore the copyright implications of training AI models on "
                   "vast datasets of existing, copyrighted images. The concept of 'fair use' is being tested in new "
                   "and unforeseen ways, and several landmark lawsuits are poised to set important precedents. We "
                   "will compare the legal approaches being considered in the United States, the UK, and the EU, "
                   "offering a glimpse into the future of intellectual property in an age of creative machines.",
    },
]

TEMPLATE_CATEGORIES = ["Data Privacy", "Intellectual Property", "Contracts & Agreements"]

TEMPLATES = [
    {
        "id": 1,
        "title": "Cease and Desist Letter (Copyright Infringement)",
        "description": "Demand that a party stop using your copyrighted digital content.",
        "category": "Intellectual Property",
        "content": """[Your Name / Company]
[Address]
[Date]

To: [Recipient Name]
[Recipient Address]

RE: Unauthorized Use of Copyrighted Material

Dear [Recipient Name],

It has come to our attention that you are reproducing and distributing [description of work], which is owned by [Your Company] and protected under applicable copyright law, at [URL or location].

You have not been granted permission to use this material. We therefore demand that you:
1. Immediately cease all use, reproduction and distribution of the work;
2. Remove the work from [URL or location] within [number] days of this letter;
3. Confirm in writing that you have complied with these demands.

If we do not receive confirmation by [deadline], we will consider all legal remedies available to us.

Sincerely,
[Signature]""",
    },
    {
        "id": 2,
        "title": "Website Privacy Policy",
        "description": "A baseline privacy policy covering collection, use and user rights.",
        "category": "Data Privacy",
        "content": """PRIVACY POLICY
Last updated: [Date]

1. Who we are
[Company Name] ("we", "us") operates [website/app]. Contact: [email].

2. Data we collect
- Information you provide (name, email, [other]).
- Information collected automatically (IP address, device data, cookies).

3. How we use your data
To provide and improve our services, communicate with you, and comply with legal obligations. Legal basis: [consent / contract / legitimate interest].

4. Sharing
We share data only with processors acting on our instructions and where required by law.

5. Retention
We keep personal data for [period] or as long as required by law.

6. Your rights
You may request access, correction, deletion, portability or restriction of your data, and object to processing. Contact [email].

7. Changes
We will post updates to this policy on this page.""",
    },
    {
        "id": 3,
        "title": "Mutual Non-Disclosure Agreement",
        "description": "Protect confidential information shared between two parties.",
        "category": "Contracts & Agreements",
        "content": """MUTUAL NON-DISCLOSURE AGREEMENT

This Agreement is entered into on [Date] between [Party A] and [Party B] (each a "Party").

1. Purpose. The Parties wish to exchange Confidential Information to evaluate [purpose].
2. Confidential Information. Any non-public business, technical or financial information disclosed by either Party, in any form.
3. Obligations. The receiving Party shall use Confidential Information only for the Purpose, protect it with reasonable care, and not disclose it to third parties without prior written consent.
4. Exclusions. Information that is public, already known, independently developed or lawfully received from a third party.
5. Term. Obligations survive for [number] years after the last disclosure.
6. Return. On request, each Party shall return or destroy the other's Confidential Information.
7. Governing law. [Jurisdiction].

Signed:
[Party A]                      [Party B]""",
    },
    {
        "id": 4,
        "title": "Data Breach Notification Letter",
        "description": "Notify affected individuals of a personal data breach.",
        "category": "Data Privacy",
        "content": """[Company Letterhead]
[Date]

Notice of Data Breach

Dear [Name],

What happened: On [date], we discovered [brief description of the incident].
What information was involved: [categories of personal data].
What we are doing: We [containment steps], notified [authority] and engaged [forensic experts].
What you can do: [recommended steps, e.g. change passwords, monitor accounts].
For more information: Contact [phone/email], available [hours].

We sincerely apologise for any inconvenience.

[Name, Title]""",
    },
    {
        "id": 5,
        "title": "Software as a Service (SaaS) Agreement",
        "description": "Core terms for providing a hosted software service.",
        "category": "Contracts & Agreements",
        "content": """SAAS AGREEMENT

Between [Provider] and [Customer], effective [Date].

1. Services. Provider grants Customer a non-exclusive right to access [service] during the Term.
2. Fees. Customer pays [amount] per [period], invoiced [frequency].
3. Service levels. Provider targets [99.x]% monthly availability; remedies: [service credits].
4. Data. Customer retains ownership of Customer Data. Provider processes it only to provide the Services and under the attached Data Processing Agreement.
5. Security. Provider maintains [standards, e.g. ISO 27001] safeguards and notifies Customer of security incidents within [hours].
6. Liability. Each Party's aggregate liability is capped at [amount], except for [exclusions].
7. Term and termination. [Initial term], renewing for [period] unless terminated with [notice].
8. Governing law. [Jurisdiction].""",
    },
    {
        "id": 6,
        "title": "Data Processing Agreement (GDPR Art. 28)",
        "description": "Controller-processor terms required by the GDPR.",
        "category": "Data Privacy",
        "content": """DATA PROCESSING AGREEMENT

Controller: [Company]. Processor: [Vendor]. Effective: [Date].

1. Subject matter and duration: processing of personal data for [service] for the term of the main agreement.
2. Nature and purpose: [description]. Categories of data subjects: [list]. Types of personal data: [list].
3. Processor obligations:
   a. Process only on documented instructions of the Controller;
   b. Ensure persons authorised to process are bound by confidentiality;
   c. Implement appropriate technical and organisational measures (Art. 32);
   d. Engage sub-processors only with prior written authorisation;
   e. Assist with data subject requests and breach notifications without undue delay;
   f. Delete or return all personal data at the end of the services;
   g. Make available information necessary to demonstrate compliance and allow audits.
4. International transfers: only under [SCCs / adequacy decision].

Signed for the Controller / Signed for the Processor""",
    },
    {
        "id": 7,
        "title": "Acceptable Use Policy (IT Systems)",
        "description": "Rules for employees and contractors using company devices and networks.",
        "category": "Contracts & Agreements",
        "content": """ACCEPTABLE USE POLICY

Applies to: all employees, contractors and visitors of [Company] using company IT systems.
Effective: [Date]

1. Permitted use. Company systems are provided for business purposes. Limited personal use is allowed if it does not interfere with work or breach this policy.
2. Prohibited use. Users must not:
   a. Access, store or distribute unlawful, offensive or infringing material;
   b. Attempt to bypass security controls or access systems without authorisation;
   c. Install unapproved software or connect unapproved devices;
   d. Share passwords or multi-factor authentication codes.
3. Data handling. Confidential and personal data must be stored only in approved locations and encrypted when in transit.
4. Monitoring. [Company] may monitor use of its systems in accordance with applicable law and [privacy notice].
5. Incident reporting. Suspected security incidents must be reported to [contact] immediately.
6. Breaches. Violations may lead to disciplinary action up to termination and, where applicable, legal action.

Acknowledged by: [Name]   Date: [Date]""",
    },
    {
        "id": 8,
        "title": "DMCA Takedown Notice",
        "description": "Request that a service provider remove infringing copies of your work.",
        "category": "Intellectual Property",
        "content": """DMCA TAKEDOWN NOTICE

To: [Service Provider] Designated Copyright Agent
[Agent Address / Email]
Date: [Date]

1. Copyrighted work: [description of the original work, with URL if online].
2. Infringing material: [URL(s) of the infringing content].
3. Contact information: [Name, Address, Phone, Email].
4. I have a good faith belief that use of the material in the manner complained of is not authorized by the copyright owner, its agent, or the law.
5. The information in this notification is accurate, and under penalty of perjury, I am the owner, or authorized to act on behalf of the owner, of an exclusive right that is allegedly infringed.

Signature: [Physical or electronic signature]
[Printed Name]""",
    },
]

EXPERIMENTS = [
    {
        "id": 1,
        "title": "Deepfake Evidence Detector",
        "description": "Flags manipulated audio, images and video before they are submitted as evidence.",
        "status": "Experimental",
    },
    {
        "id": 2,
        "title": "Automated Compliance Monitor",
        "description": "Continuously checks your public policies against newly enacted regulations.",
        "status": "In Development",
    },
    {
        "id": 3,
        "title": "Dark Web Leak Tracker",
        "description": "Alerts you when your organisation's credentials or documents appear in known leak sites.",
        "status": "Experimental",
    },
    {
        "id": 4,
        "title": "Jurisdiction Conflict Mapper",
        "description": "Visualises where cross-border data flows collide with conflicting national laws.",
        "status": "Concept",
    },
]

EXPERIMENT_STATUS_KEYS = {
    "Experimental": "labs.status.experimental",
    "In Development": "labs.status.development",
    "Concept": "labs.status.concept",
}

TIMELINE = [
    {"year": "1986", "title": "Computer Fraud and Abuse Act (CFAA)",
     "description": "The first major US legislation addressing computer crime, setting a foundational legal "
                    "framework for hacking.", "type": "law"},
    {"year": "1997", "title": "Deep Blue defeats Garry Kasparov",
     "description": "IBM's chess computer's victory marked a major milestone in AI's ability to tackle complex "
                    "strategic tasks.", "type": "ai"},
    {"year": "2000", "title": "E-SIGN Act",
     "description": "Legitimized electronic signatures in the US, crucial for the growth of digital commerce and "
                    "contracts.", "type": "law"},
    {"year": "2012", "title": "AlexNet wins ImageNet",
     "description": "A deep learning model that revolutionized computer vision and kickstarted the modern AI "
                    "boom.", "type": "ai"},
    {"year": "2016", "title": "General Data Protection Regulation (GDPR)",
     "description": "The EU enacted the GDPR, establishing a new global standard for data privacy and user "
                    "rights.", "type": "law"},
    {"year": "2017", "title": "Transformers Architecture",
     "description": "Google researchers publish 'Attention Is All You Need', introducing the transformer "
                    "architecture that powers modern LLMs.", "type": "ai"},
    {"year": "2018", "title": "CLOUD Act",
     "description": "US law allowing federal law enforcement to compel tech companies to provide requested data "
                    "stored on servers regardless of location.", "type": "law"},
    {"year": "2022", "title": "Launch of ChatGPT",
     "description": "OpenAI's release of ChatGPT brought generative AI into the mainstream, demonstrating its "
                    "powerful capabilities to the public.", "type": "ai"},
]

EXPERTS = [
    {"id": 1, "name": "Dr. Sarah Chen", "location": "San Francisco, CA",
     "specialization": "Data Privacy & GDPR", "rating": 4.9, "reviews": 127},
    {"id": 2, "name": "James Wilson", "location": "New York, NY",
     "specialization": "Cybercrime & Digital Forensics", "rating": 4.8, "reviews": 93},
    {"id": 3, "name": "Amélie Laurent", "location": "Paris, France",
     "specialization": "EU Data Protection & AI Act", "rating": 4.7, "reviews": 64},
    {"id": 4, "name": "Rahul Mehta", "location": "Bengaluru, India",
     "specialization": "IT Act & Data Protection", "rating": 4.6, "reviews": 58},
]

# Seed documents for the laws collection
CYBER_LAWS = [
    {
        "LawID": 1,
        "Country": "European Union",
        "Title": "General Data Protection Regulation (GDPR)",
        "Summary": "Comprehensive data protection law that standardizes data privacy laws across Europe.",
        "KeyPoints": ["Right to be forgotten", "Data portability", "Privacy by design",
                      "Mandatory breach notification"],
        "Penalties": "Up to €20 million or 4% of global revenue",
    },
    {
        "LawID": 2,
        "Country": "United States",
        "Title": "California Consumer Privacy Act (CCPA)",
        "Summary": "State-level privacy law that enhances privacy rights and consumer protection.",
        "KeyPoints": ["Right to access personal data", "Right to delete personal data", "Opt-out rights",
                      "Data breach liability"],
        "Penalties": "Up to $7,500 per intentional violation",
    },
    {
        "LawID": 3,
        "Country": "United States",
        "Title": "Computer Fraud and Abuse Act (CFAA)",
        "Summary": "",
        "KeyPoints": ["Unauthorized access to protected computers", "Exceeding authorized access",
                      "Civil action for damages"],
        "Penalties": "Fines and imprisonment of up to 10 years for first offences",
    },
    {
        "LawID": 4,
        "Country": "Brazil",
        "Title": "Lei Geral de Proteção de Dados (LGPD)",
        "Summary": "",
        "KeyPoints": ["Ten legal bases for processing", "Data protection officer", "National data protection "
                      "authority (ANPD)"],
        "Penalties": "Up to 2% of revenue in Brazil, capped at R$50 million per infraction",
    },
    {
        "LawID": 5,
        "Country": "India",
        "Title": "Digital Personal Data Protection Act 2023",
        "Summary": "",
        "KeyPoints": ["Consent managers", "Duties of data principals", "Data Protection Board of India"],
        "Penalties": "Up to ₹250 crore per instance",
    },
    {
        "LawID": 6,
        "Country": "Japan",
        "Title": "Act on the Protection of Personal Information (APPI)",
        "Summary": "",
        "KeyPoints": ["Purpose specification", "Cross-border transfer restrictions", "Breach reporting to the PPC"],
        "Penalties": "Up to ¥100 million for corporations",
    },
    {
        "LawID": 7,
        "Country": "Australia",
        "Title": "Privacy Act 1988 and Notifiable Data Breaches scheme",
        "Summary": "",
        "KeyPoints": ["Australian Privacy Principles", "Notifiable data breaches", "OAIC enforcement"],
        "Penalties": "Up to AUD 50 million for serious or repeated interferences",
    },
]
