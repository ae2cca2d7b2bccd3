"""Static knowledge for the Emilia assistant: FAQ table and site content.

All content is loaded at import time and never mutated.
"""

from __future__ import annotations

from manda.knowledge.schemas import FAQEntry

# ---------------------------------------------------------------------------
# FAQ catalog (order is significant: rules address entries by index)
# ---------------------------------------------------------------------------

FAQ_ENTRIES: tuple[FAQEntry, ...] = (
    FAQEntry(
        question=(
            "The company is located in a rural area. "
            "Is it possible to transfer the company through M&A?"
        ),
        answer=(
            "Of course, you can. We will visit you anywhere in the country free of charge. "
            "Many of the companies we have worked with as M&A intermediaries are local "
            "companies."
        ),
    ),
    FAQEntry(
        question="How long does it take for the M&A / company transfer to succeed?",
        answer=(
            "The quickest is 1.5 months from the time of your request. First, we select "
            "about 500 - 1000 companies from our database and search for potential buyers. "
            "At the earliest, we will conduct an interview within one month from the "
            "retainer consultation, go through a period of due diligence, and quickly lead "
            "to the conclusion of a contract. Since our M&A Advisers have a wealth of M&A "
            "support experience, we can shorten the time required for M&A by eliminating "
            "unnecessary exchanges between matching and closing."
        ),
    ),
    FAQEntry(
        question="What are the M&A intermediary fees?",
        answer=(
            "We put our customers first and have adopted a completely success-based fee "
            "system for M&A of transfer companies. We do not receive any retainer fee or "
            "interim fee. For details, please refer to 'Pricing System'."
        ),
    ),
    FAQEntry(
        question="What are the advantages of the M&A Research Institute Inc.?",
        answer=(
            "• Transferee company, completely success-based fee system (free of charge "
            "until the contract is closed) \n• Extensive track record of M&A support \n"
            "• Full support from experienced M&A Advisers \nThese are our 4 strengths. "
            "At M&A Research Institute Inc., Advisers who specialize in M&A will conduct "
            "M&A negotiations in a polite and sincere manner."
        ),
    ),
    FAQEntry(
        question=(
            "Will information be leaked to business partners, employees, "
            "or financial institutions?"
        ),
        answer=(
            "Our company strives to thoroughly manage the confidential information "
            "entrusted to us by our customers. Also, when making a proposal to potential "
            "buyers, we will only disclose information after narrowing down the potential "
            "buyers and concluding an NDA (non-disclosure agreement). If you ask multiple "
            "M&A intermediary companies to act as mediators (so-called non-exclusive "
            "contracts), the risk of information leakage increases. In order to prevent "
            "information leaks, we recommend that you sign an exclusive contract with only "
            "one company as an intermediary."
        ),
    ),
    FAQEntry(
        question="I have not decided on M&A, but can I consult with you?",
        answer=(
            "Please feel free to contact us. Talk with us, and we can find the best ideas "
            "together. We are happy to hear from you if you would like to collect "
            "information."
        ),
    ),
    FAQEntry(
        question="We are in the red this term, but is M&A possible?",
        answer=(
            "There are many cases of M&A of loss-making companies. Consultation fee is "
            "free, so please contact us first."
        ),
    ),
    FAQEntry(
        question="How is the transfer price for the M&A calculated?",
        answer=(
            "The M&A Adviser will calculate the corporate value after considering not only "
            "tangible assets and profits, but also intangible assets and know-how. Based on "
            "the results, we will determine the desired transfer price based on the "
            "owner's intentions."
        ),
    ),
    FAQEntry(
        question="Can I transfer or sell only one business?",
        answer=(
            "There are various methods such as business transfer and company split, so "
            "please contact us first."
        ),
    ),
    FAQEntry(
        question=(
            "Will the CEO continue to be involved in the business when the transfer is "
            "decided with M&A?"
        ),
        answer=(
            "In some cases, they will continue to be involved in the business after the "
            "transfer, and in others, they will retire. It is possible to proceed "
            "according to the president's wishes."
        ),
    ),
)

# The public FAQ page carries a longer answer on deal timing.
SITE_FAQ_ENTRIES: tuple[FAQEntry, ...] = (
    FAQ_ENTRIES[0],
    FAQEntry(
        question=FAQ_ENTRIES[1].question,
        answer=(
            FAQ_ENTRIES[1].answer
            + " In the M&A industry, we often hear people say, 'I requested an Adviser, "
            "but several months passed with nothing.' At the M&A Research Institute Inc., "
            "we commit to results from the customer's point of view."
        ),
    ),
    *FAQ_ENTRIES[2:],
)

# ---------------------------------------------------------------------------
# Valuation services
# ---------------------------------------------------------------------------

VALUATION_OVERVIEW = (
    "At M&A × AI, your business valuation begins entirely free of charge, saving you "
    "thousands typically spent on initial consulting fees. Our advanced AI-driven "
    "valuation platform gives you precise insights into your company's worth quickly "
    "and efficiently."
)

VALUATION_FEATURES: tuple[str, ...] = (
    "Instant Free Valuation - Receive a professional valuation within minutes, "
    "benchmarked against real-time European market data.",
    "Zero Cost Until Deal - No hidden costs. You only pay upon the successful closure "
    "of your M&A transaction.",
    "Transparent & Trustworthy - Our fees are clearly based on the final transfer "
    "price, ensuring fairness and transparency.",
)

VALUATION_METHODOLOGY: tuple[str, ...] = (
    "EBITDA Multiple Method - Industry-specific multipliers based on real European "
    "transaction data",
    "Discounted Cash Flow Analysis - Forward-looking valuation with risk-adjusted "
    "European discount rates",
    "Asset-Based Valuation - Comprehensive assessment of tangible and intangible assets",
    "Comparable Transaction Analysis - Benchmarking against recent European M&A deals",
)

VALUATION_AI_FEATURES: tuple[str, ...] = (
    "Machine Learning Models - Trained on 10,000+ European transactions for regional "
    "accuracy",
    "Industry-Specific Factors - 57+ data points analyzed per valuation",
    "Real-Time Market Data - Continuous updates from European financial markets",
    "Risk Assessment - Advanced algorithms to identify and quantify business-specific "
    "risks",
)

# ---------------------------------------------------------------------------
# Our approach
# ---------------------------------------------------------------------------

APPROACH_OVERVIEW = (
    "At M&A × AI, we understand European SMBs deeply. We recognize that many businesses, "
    "particularly those owned by baby boomers, face challenges in finding suitable "
    "successors. While big Private Equity firms often overlook these businesses, we step "
    "in to empower SMBs by providing fun, real-time, and free valuations using "
    "cutting-edge AI technology."
)

APPROACH_DETAIL = (
    "We're revolutionizing the traditional, slow, and boring M&A processes, turning them "
    "into simple, exciting experiences. Our state-of-the-art AI matching algorithms, "
    "developed by M&A Research Institute Inc., enable rapid, accurate matches for "
    "mergers, acquisitions, investments, and sales opportunities. First, we help "
    "entrepreneurs get a fast, hassle-free valuation. If you're happy with this initial "
    "insight, we're here to guide you seamlessly towards your ultimate business goals."
)

APPROACH_FEATURES: tuple[str, ...] = (
    "AI-Powered Insights - Our proprietary algorithms analyze over 30 market factors to "
    "provide accurate, data-driven valuations tailored specifically to European markets.",
    "Accelerated Processes - We've streamlined the entire M&A journey, enabling deals to "
    "close in as little as 49 days, drastically faster than the industry average of 6-9 "
    "months.",
    "Data-Driven Matching - Our algorithms match businesses with potential buyers based "
    "on over 150 compatibility factors, ensuring the best possible fit for long-term "
    "success.",
    "Success-Based Model - We only charge fees upon successful deal closure, aligning our "
    "incentives perfectly with yours and eliminating the burden of upfront or hidden "
    "costs.",
)

# ---------------------------------------------------------------------------
# European markets
# ---------------------------------------------------------------------------

MARKETS_OVERVIEW = (
    "Europe's economic landscape in 2025 presents a complex mix of challenges and "
    "opportunities for small and medium-sized businesses (SMBs). While overall GDP "
    "growth is projected to be modest, certain sectors and regions offer significant "
    "potential for investment and expansion."
)

MARKETS_OUTLOOK = (
    "The European Commission forecasts a GDP growth of 0.9% in 2025, with an "
    "acceleration to 1.5% in 2026. Despite this modest growth, specific sectors present "
    "significant opportunities for SMBs."
)

MARKET_SECTORS: tuple[str, ...] = (
    "Technology and Digital Transformation: The rapid advancement in digital "
    "technologies continues to create opportunities for SMBs, particularly in areas like "
    "artificial intelligence, cybersecurity, and high-performance computing.",
    "Renewable Energy: The EU's commitment to the Green Deal necessitates significant "
    "investments in sustainable energy solutions, presenting opportunities for SMBs in "
    "the renewable energy sector.",
    "Pharmaceuticals and Healthcare: An aging population and increased focus on "
    "healthcare innovation make this sector ripe for investment and expansion.",
)

MARKET_REGIONS: tuple[str, ...] = (
    "Nordics: Known for tech innovation and a supportive startup ecosystem, countries "
    "like Sweden and Finland offer fertile ground for technology-focused SMBs.",
    "Benelux: Belgium, Netherlands, and Luxembourg provide robust digital "
    "infrastructures and a strategic location for digital services companies.",
    "Southern Europe: Countries such as Spain and Italy are investing heavily in "
    "renewable energy, aligning with the EU's sustainability goals and offering "
    "opportunities in the green energy sector.",
)

MARKET_SUPPORT: tuple[str, ...] = (
    "SME Fund 2025: This initiative by the European Commission provides financial "
    "support to SMEs established in the EU to protect their intellectual property "
    "rights.",
    "SME Access to Finance Initiative: A joint program by the European Investment Bank "
    "(EIB) and the EU aims to enhance access to finance for SMBs.",
    "Digital Europe Programme: Launched in 2021, this funding instrument focuses on "
    "development and innovation in digital technologies.",
)

MARKET_TRENDS: tuple[str, ...] = (
    "Sustainability and Green Investments: There's a strong push towards "
    "sustainability, with substantial investments required to meet the EU's climate "
    "goals.",
    "Digital Transformation: The accelerated adoption of digital technologies across "
    "sectors is creating new business models and opportunities.",
    "Regulatory Simplification: Efforts are underway to simplify regulations, making it "
    "easier for SMBs to operate and expand.",
)

# ---------------------------------------------------------------------------
# Company
# ---------------------------------------------------------------------------

COMPANY_NAME = "M&A × AI"
COMPANY_SPECIALTY = (
    "Business valuation and M&A facilitation for European SMBs with EBITDA under "
    "€10 million"
)
COMPANY_VALUE_PROPOSITION = (
    "Zero upfront fees, AI-powered valuations, and success-based fee structure"
)
COMPANY_CONTACT = "Please use the contact form on our website to reach our M&A Advisers."

# ---------------------------------------------------------------------------
# Public site copy (used by the site FAQ responder)
# ---------------------------------------------------------------------------

SITE_COMPANY_INFO = (
    "M&A Research Institute Inc. specializes in M&A and business succession solutions "
    "for European SMBs with EBITDA under €10 million. We offer a completely "
    "success-based fee system for transfer companies with no retainer or interim fees."
)

SITE_VALUATION_INFO = (
    "Our valuation process takes into account not only tangible assets and profits but "
    "also intangible assets, market position, and growth potential. We provide "
    "comprehensive valuation services to determine the optimal transfer price based on "
    "the owner's intentions."
)

SITE_SERVICES: tuple[str, ...] = (
    "M&A Advisory",
    "Business Succession Planning",
    "Valuation Services",
    "Buyer Matching",
    "Due Diligence Support",
    "Post-Merger Integration",
)

SITE_EUROPEAN_MARKETS = (
    "We specialize in European SMB markets with a focus on companies in the Benelux and "
    "DACH regions. Our expertise covers various industries including manufacturing, "
    "technology, healthcare, and professional services."
)

SITE_CONTACT_INFO = (
    "Please feel free to contact us for a consultation. Our experienced M&A Advisers are "
    "ready to assist you with any questions regarding M&A or business succession."
)

# ---------------------------------------------------------------------------
# Persona
# ---------------------------------------------------------------------------

ASSISTANT_SYSTEM_PROMPT = (
    "You are Emilia, an expert business valuation assistant for European SMBs."
)

REMOTE_SYSTEM_PROMPT = (
    "You are Emilia, an expert business valuation assistant for the MANDA Institute, "
    "specializing in European SMBs with EBITDA under €10 million. Provide helpful, "
    "concise advice about business valuation, mergers and acquisitions, and exit "
    "strategies."
)

GREETING = (
    "Hello! I'm Emilia, your business valuation assistant. How can I help you today?"
)
