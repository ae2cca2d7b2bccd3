"""Static industry, metric and range tables for the benchmark simulator."""

from __future__ import annotations

from manda.benchmarks.schemas import (
    BenchmarkMetric,
    BenchmarkRange,
    Industry,
    MetricUnit,
    Subcategory,
)

S = Subcategory

# ---------------------------------------------------------------------------
# Industries
# ---------------------------------------------------------------------------

INDUSTRIES: tuple[Industry, ...] = (
    Industry(
        "pe-vc",
        "Private Equity & Venture Capital",
        "Firms investing in private companies at various stages of growth and maturity.",
        (
            S("pe-vc-growth", "Growth Equity",
              "Investments in companies with proven business models seeking capital for expansion."),
            S("pe-vc-buyout", "Buyout Firms",
              "Firms that acquire majority control of mature companies using significant leverage."),
            S("pe-vc-early-stage", "Early Stage VC",
              "Investments in startups and early-stage companies with high growth potential."),
            S("pe-vc-late-stage", "Late Stage VC",
              "Investments in more established private companies preparing for exits or IPOs."),
            S("pe-vc-impact", "Impact Investing",
              "Investments made with the intention to generate positive social or environmental "
              "impact alongside financial returns."),
            S("pe-vc-secondary", "Secondary Funds",
              "Firms specializing in acquiring existing LP interests in private equity funds."),
            S("pe-vc-debt", "Private Debt",
              "Funds providing debt financing to private companies or PE-backed businesses."),
            S("pe-vc-distressed", "Distressed & Special Situations",
              "Firms investing in troubled companies or special opportunity situations."),
        ),
    ),
    Industry(
        "im",
        "Investment Management",
        "Organizations managing investments across various asset classes and strategies.",
        (
            S("im-asset", "Asset Management",
              "Firms managing investment portfolios on behalf of clients."),
            S("im-wealth", "Wealth Management",
              "Financial advisory services for high-net-worth individuals and families."),
            S("im-hedge", "Hedge Funds",
              "Investment funds employing various strategies to generate alpha and manage risk."),
            S("im-family", "Family Offices",
              "Private wealth management firms serving ultra-high-net-worth individuals and "
              "families."),
            S("im-pension", "Pension Funds",
              "Retirement investment funds managing assets for plan participants."),
            S("im-sovereign", "Sovereign Wealth Funds",
              "State-owned investment funds managing a country's assets."),
            S("im-endowment", "Endowments & Foundations",
              "Investment organizations managing assets for educational institutions and "
              "nonprofit organizations."),
            S("im-etf", "ETF & Index Providers",
              "Organizations creating and managing exchange-traded funds and index products."),
        ),
    ),
    Industry(
        "ib",
        "Investment Banking",
        "Financial institutions that provide capital raising, M&A, and advisory services to "
        "corporations and governments.",
        (
            S("ib-ma", "Mergers & Acquisitions",
              "Advisory services for company mergers, acquisitions, divestitures, and "
              "restructurings."),
            S("ib-capital-markets", "Capital Markets",
              "Services for companies raising capital through debt and equity offerings."),
            S("ib-restructuring", "Restructuring & Distressed",
              "Advisory services for companies undergoing financial restructuring or bankruptcy."),
            S("ib-private-placement", "Private Placements",
              "Services to help companies raise capital through private securities offerings."),
            S("ib-specialty", "Industry Specialists",
              "Investment banks with specialized expertise in specific industry sectors."),
            S("ib-boutique", "Boutique Advisory Firms",
              "Independent firms offering specialized investment banking services."),
            S("ib-full-service", "Full-Service Investment Banks",
              "Large financial institutions offering a comprehensive range of investment "
              "banking services."),
            S("ib-merchant", "Merchant Banking",
              "Banks that both advise on and invest in transactions with their own capital."),
        ),
    ),
    Industry(
        "tech",
        "Technology",
        "Companies involved in the research, development, or distribution of technologically "
        "based goods and services.",
        (
            S("tech-software", "Enterprise Software",
              "Companies developing business applications, productivity software, and platforms "
              "for corporate use."),
            S("tech-saas", "SaaS & Cloud",
              "Companies offering software as a service and cloud-based solutions."),
            S("tech-ai", "AI & Machine Learning",
              "Companies focused on artificial intelligence and machine learning technologies."),
            S("tech-fintech", "Financial Technology",
              "Technology companies providing financial services and solutions."),
            S("tech-healthtech", "Healthcare Technology",
              "Technology companies serving the healthcare industry with software and solutions."),
            S("tech-cybersecurity", "Cybersecurity",
              "Companies providing cybersecurity solutions and services."),
            S("tech-data", "Data Analytics & Services",
              "Companies specializing in data processing, analytics, and insights."),
            S("tech-enterprise", "Enterprise Infrastructure",
              "Companies providing technology infrastructure solutions for large organizations."),
        ),
    ),
    Industry(
        "fs",
        "Financial Services",
        "Institutions that provide financial and banking products and services.",
        (
            S("fs-banking", "Banking",
              "Traditional and digital banking institutions offering deposit and lending "
              "services."),
            S("fs-insurance", "Insurance",
              "Companies providing various types of insurance coverage and risk management "
              "solutions."),
            S("fs-payments", "Payments & Processing",
              "Companies facilitating payment transactions and processing services."),
            S("fs-lending", "Specialty Lending",
              "Financial institutions focused on specific lending segments or non-traditional "
              "lending."),
            S("fs-marketmaking", "Market Making & Trading",
              "Firms providing liquidity and trading services in financial markets."),
            S("fs-exchanges", "Exchanges & Trading Platforms",
              "Organizations that operate financial markets and trading platforms."),
            S("fs-advisory", "Financial Advisory",
              "Firms providing financial planning and advisory services to individuals and "
              "businesses."),
            S("fs-services", "Financial Services Tech",
              "Technology providers specializing in solutions for financial institutions."),
        ),
    ),
    Industry(
        "hc",
        "Healthcare",
        "Organizations involved in the provision of healthcare services or products.",
        (
            S("hc-providers", "Healthcare Providers",
              "Hospitals, clinics, physician practices, and other healthcare service providers."),
            S("hc-pharma", "Pharmaceuticals",
              "Companies that research, develop, and produce pharmaceuticals."),
            S("hc-biotech", "Biotechnology",
              "Companies applying biology and technology to develop healthcare products and "
              "solutions."),
            S("hc-devices", "Medical Devices",
              "Companies that manufacture medical devices and equipment."),
            S("hc-digital", "Digital Health",
              "Companies providing technology-enabled healthcare services and solutions."),
            S("hc-services", "Healthcare Services",
              "Service providers supporting the healthcare industry."),
            S("hc-payers", "Payers & Insurance",
              "Health insurance companies and organizations managing healthcare benefits."),
            S("hc-diagnostics", "Diagnostics & Labs",
              "Companies providing diagnostic testing and laboratory services."),
        ),
    ),
    Industry(
        "biz",
        "Business Services",
        "Companies that provide essential services and solutions to businesses across "
        "industries.",
        (
            S("biz-consulting", "Management Consulting",
              "Firms providing strategic and operational advisory services to businesses."),
            S("biz-hr", "HR & Workforce Solutions",
              "Companies providing human resources services, staffing, and workforce "
              "management."),
            S("biz-marketing", "Marketing & Communications",
              "Agencies and service providers for marketing, advertising, and communications."),
            S("biz-legal", "Legal Services",
              "Law firms and legal service providers for corporate clients."),
            S("biz-analytics", "Data & Analytics Services",
              "Firms providing data management, analytics, and business intelligence services."),
            S("biz-outsourcing", "Business Process Outsourcing",
              "Companies that manage outsourced business operations for clients."),
            S("biz-professional", "Professional Services",
              "Accounting, tax, audit, and other specialized professional services."),
            S("biz-logistics", "Logistics & Supply Chain",
              "Companies providing logistics, supply chain management, and distribution "
              "services."),
        ),
    ),
    Industry(
        "consumer",
        "Consumer",
        "Companies providing products and services directly to consumers.",
        (
            S("consumer-retail", "Retail & E-commerce",
              "Traditional and online retailers selling products to consumers."),
            S("consumer-cpg", "Consumer Products",
              "Companies manufacturing and selling packaged consumer goods."),
            S("consumer-food", "Food & Beverage",
              "Companies producing and distributing food and beverage products."),
            S("consumer-luxury", "Luxury & Premium Brands",
              "Businesses offering high-end luxury products and premium experiences."),
            S("consumer-travel", "Travel & Leisure",
              "Companies providing travel, hospitality, and leisure services and experiences."),
            S("consumer-media", "Media & Entertainment",
              "Companies creating and distributing content and entertainment for consumers."),
            S("consumer-apparel", "Apparel & Fashion",
              "Businesses designing, manufacturing, and selling clothing and fashion items."),
            S("consumer-tech", "Consumer Technology",
              "Companies producing technology products and services for consumer use."),
        ),
    ),
    Industry(
        "industry",
        "Industrial",
        "Companies involved in manufacturing, construction, materials, and related industrial "
        "activities.",
        (
            S("industry-manufacturing", "Advanced Manufacturing",
              "Companies using advanced technologies for manufacturing products."),
            S("industry-aerospace", "Aerospace & Defense",
              "Companies producing aircraft, defense systems, and related technologies."),
            S("industry-auto", "Automotive & Mobility",
              "Companies involved in the automotive industry and mobility solutions."),
            S("industry-construction", "Construction & Engineering",
              "Companies providing construction, engineering, and related services."),
            S("industry-chemicals", "Chemicals & Materials",
              "Companies producing industrial chemicals and advanced materials."),
            S("industry-machinery", "Machinery & Equipment",
              "Manufacturers of industrial machinery and equipment."),
            S("industry-automation", "Industrial Automation",
              "Companies providing automation solutions for industrial processes."),
            S("industry-logistics", "Transportation & Logistics",
              "Companies involved in transportation, logistics, and supply chain operations."),
        ),
    ),
    Industry(
        "energy",
        "Energy & Natural Resources",
        "Companies involved in energy production, utilities, and management of natural "
        "resources.",
        (
            S("energy-oil", "Oil & Gas",
              "Companies involved in the exploration, extraction, and processing of oil and gas."),
            S("energy-renewable", "Renewable Energy",
              "Companies focused on renewable energy sources like solar, wind, and hydro."),
            S("energy-utilities", "Utilities",
              "Companies providing electricity, water, and gas utility services."),
            S("energy-cleantech", "CleanTech",
              "Companies developing technologies to optimize energy usage and reduce "
              "environmental impact."),
            S("energy-storage", "Energy Storage & Grid",
              "Companies providing energy storage solutions and grid infrastructure."),
            S("energy-carbon", "Carbon Management",
              "Companies involved in carbon capture, storage, and carbon credit trading."),
            S("energy-mining", "Mining & Minerals",
              "Companies involved in exploration and extraction of minerals and resources."),
        ),
    ),
    Industry(
        "realestate",
        "Real Estate & Construction",
        "Companies involved in property development, management, and construction.",
        (
            S("realestate-commercial", "Commercial Real Estate",
              "Development and management of commercial properties."),
            S("realestate-residential", "Residential Real Estate",
              "Development and management of residential properties."),
            S("realestate-construction", "Construction",
              "Companies providing construction services for various property types."),
            S("realestate-industrial", "Industrial Construction",
              "Companies building industrial facilities and plants."),
            S("realestate-renovation", "Renovation & Restoration",
              "Companies specializing in renovation and restoration of existing buildings."),
        ),
    ),
    Industry(
        "education",
        "Education & Training",
        "Organizations providing educational services and training programs.",
        (
            S("education-k12", "K-12 Education", "Primary and secondary education providers."),
            S("education-higher", "Higher Education",
              "Colleges, universities, and post-secondary institutions."),
            S("education-online", "Online Education",
              "Digital learning platforms and online course providers."),
            S("education-professional", "Professional Training",
              "Companies providing professional development and vocational training."),
            S("education-tech", "Educational Technology",
              "Companies developing technology solutions for education."),
            S("education-language", "Language Learning",
              "Language schools and language learning platforms."),
            S("education-testing", "Testing & Assessment",
              "Companies providing educational testing and assessment services."),
            S("education-tutoring", "Tutoring & Coaching",
              "Tutoring services and academic coaching."),
        ),
    ),
    Industry(
        "agriculture",
        "Agriculture & Farming",
        "Businesses involved in crop production, livestock, and related services.",
        (
            S("agriculture-crops", "Crop Production",
              "Companies growing crops, grains, and produce."),
            S("agriculture-livestock", "Livestock & Animal Products",
              "Companies raising animals and producing animal products."),
            S("agriculture-equipment", "Agricultural Equipment",
              "Manufacturers of farming machinery and equipment."),
            S("agriculture-tech", "AgTech",
              "Companies developing technology solutions for agriculture."),
            S("agriculture-organic", "Organic & Sustainable Farming",
              "Farms and companies using organic and sustainable methods."),
            S("agriculture-processing", "Food Processing",
              "Companies processing agricultural products into food items."),
            S("agriculture-distribution", "Agricultural Distribution",
              "Companies involved in the distribution of agricultural products."),
            S("agriculture-aquaculture", "Aquaculture & Fisheries",
              "Companies involved in fish farming and fisheries."),
        ),
    ),
    Industry(
        "transportation",
        "Transportation & Logistics",
        "Companies involved in the movement of people and goods.",
        (
            S("transportation-freight", "Freight & Logistics",
              "Companies providing freight transport and logistics services."),
            S("transportation-passenger", "Passenger Transportation",
              "Companies providing transportation services for people."),
            S("transportation-air", "Air Transport", "Airlines and air cargo companies."),
            S("transportation-maritime", "Maritime & Shipping",
              "Companies involved in sea transport and shipping."),
            S("transportation-rail", "Rail Transport",
              "Railway companies and rail freight services."),
            S("transportation-road", "Road Transport", "Trucking and road freight companies."),
            S("transportation-warehousing", "Warehousing & Storage",
              "Companies providing warehousing and storage facilities."),
            S("transportation-lastmile", "Last-Mile Delivery",
              "Companies specializing in last-mile delivery services."),
        ),
    ),
    Industry(
        "nonprofit",
        "Nonprofit & Social Services",
        "Organizations dedicated to charitable, educational, or social causes.",
        (
            S("nonprofit-charity", "Charitable Organizations",
              "Nonprofits focused on charitable activities and donations."),
            S("nonprofit-health", "Health & Medical Research",
              "Organizations focused on health and medical research."),
            S("nonprofit-education", "Educational Foundations",
              "Nonprofits supporting educational initiatives."),
            S("nonprofit-environment", "Environmental & Conservation",
              "Organizations dedicated to environmental causes and conservation."),
            S("nonprofit-arts", "Arts & Culture",
              "Nonprofits supporting arts, culture, and heritage."),
            S("nonprofit-community", "Community Development",
              "Organizations focused on community improvement and development."),
            S("nonprofit-human", "Human Rights & Advocacy",
              "Organizations advocating for human rights and social justice."),
            S("nonprofit-religious", "Religious Organizations",
              "Faith-based nonprofit organizations."),
        ),
    ),
)

# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

M = BenchmarkMetric
U = MetricUnit

METRICS: tuple[BenchmarkMetric, ...] = (
    # Financial performance
    M("revenue_growth", "Revenue Growth", "Annual revenue growth rate", U.PERCENT),
    M("profit_margin", "Profit Margin", "Net profit margin", U.PERCENT),
    M("gross_margin", "Gross Margin", "Gross profit as a percentage of revenue", U.PERCENT),
    M(
        "ebitda_margin",
        "EBITDA Margin",
        "Earnings before interest, taxes, depreciation, and amortization as a percentage "
        "of revenue",
        U.PERCENT,
    ),
    M("roi", "Return on Investment", "Return on investment", U.PERCENT),
    M("roa", "Return on Assets", "Net income divided by total assets", U.PERCENT),
    M("roe", "Return on Equity", "Net income divided by shareholders' equity", U.PERCENT),
    # Operational
    M("employee_productivity", "Employee Productivity", "Revenue per employee", U.CURRENCY),
    M(
        "operating_expense_ratio",
        "Operating Expense Ratio",
        "Operating expenses as a percentage of revenue",
        U.PERCENT,
        higher_is_better=False,
    ),
    M(
        "inventory_turnover",
        "Inventory Turnover",
        "Cost of goods sold divided by average inventory",
        U.RATIO,
    ),
    M("asset_turnover", "Asset Turnover", "Revenue divided by total assets", U.RATIO),
    # Customer
    M(
        "customer_acquisition_cost",
        "Customer Acquisition Cost",
        "Cost to acquire a new customer",
        U.CURRENCY,
        higher_is_better=False,
    ),
    M(
        "customer_lifetime_value",
        "Customer Lifetime Value",
        "Total value a customer brings over their lifetime",
        U.CURRENCY,
    ),
    M(
        "customer_retention",
        "Customer Retention Rate",
        "Percentage of customers retained",
        U.PERCENT,
    ),
    M(
        "customer_satisfaction",
        "Customer Satisfaction Score",
        "Average customer satisfaction rating",
        U.SCORE,
    ),
    M(
        "nps",
        "Net Promoter Score",
        "Likelihood of customers to recommend the business",
        U.SCORE,
    ),
    # Technology & innovation
    M(
        "digital_transformation",
        "Digital Transformation Index",
        "Level of digital technology adoption",
        U.SCORE,
    ),
    M("r_and_d", "R&D Investment", "R&D spending as % of revenue", U.PERCENT),
    M(
        "innovation_rate",
        "Innovation Rate",
        "Percentage of revenue from new products/services in the last three years",
        U.PERCENT,
    ),
    M(
        "tech_stack_modernity",
        "Tech Stack Modernity",
        "Assessment of how modern the company's technology stack is",
        U.SCORE,
    ),
    # Risk & financial health
    M(
        "debt_to_equity",
        "Debt to Equity Ratio",
        "Ratio of total debt to shareholders' equity",
        U.RATIO,
        higher_is_better=False,
    ),
    M("current_ratio", "Current Ratio", "Current assets divided by current liabilities", U.RATIO),
    M("quick_ratio", "Quick Ratio", "Quick assets divided by current liabilities", U.RATIO),
    M("cash_flow", "Cash Flow Margin", "Operating cash flow as % of revenue", U.PERCENT),
    M(
        "interest_coverage",
        "Interest Coverage Ratio",
        "EBIT divided by interest expenses",
        U.RATIO,
    ),
    # Growth & scalability
    M("market_share", "Market Share", "Company's percentage of total market sales", U.PERCENT),
    M(
        "growth_rate",
        "Compound Annual Growth Rate (CAGR)",
        "Average annual growth rate over a specific period",
        U.PERCENT,
    ),
    M(
        "scalability_score",
        "Scalability Score",
        "Assessment of how easily the business can scale",
        U.SCORE,
    ),
    # ESG
    M(
        "carbon_footprint",
        "Carbon Footprint",
        "CO2 emissions per unit of revenue",
        U.EMISSIONS,
        higher_is_better=False,
    ),
    M(
        "employee_satisfaction",
        "Employee Satisfaction",
        "Average employee satisfaction score",
        U.SCORE,
    ),
    M(
        "diversity_score",
        "Diversity & Inclusion Score",
        "Assessment of company's diversity and inclusion practices",
        U.SCORE,
    ),
    M(
        "governance_rating",
        "Corporate Governance Rating",
        "Rating of company's governance practices",
        U.SCORE,
    ),
)

# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------

R = BenchmarkRange

MISSING_RANGE = R(0, 50, 100)

DEFAULT_RANGES: dict[str, BenchmarkRange] = {
    "revenue_growth": R(2, 8, 20),
    "profit_margin": R(5, 15, 30),
    "roi": R(5, 15, 30),
    "employee_productivity": R(80000, 150000, 300000),
    "customer_acquisition_cost": R(50, 200, 1000),
    "customer_retention": R(60, 80, 95),
    "digital_transformation": R(30, 65, 90),
    "r_and_d": R(1, 5, 15),
    "debt_to_equity": R(0.1, 1.0, 2.5),
    "cash_flow": R(5, 15, 25),
}

# Keys are legacy sector names; only "tech" is also a catalog industry id.
INDUSTRY_ADJUSTMENTS: dict[str, dict[str, BenchmarkRange]] = {
    "tech": {
        "revenue_growth": R(5, 18, 40),
        "profit_margin": R(10, 20, 35),
        "digital_transformation": R(50, 80, 95),
        "r_and_d": R(8, 15, 25),
    },
    "retail": {
        "profit_margin": R(2, 8, 15),
        "customer_acquisition_cost": R(10, 50, 200),
        "customer_retention": R(65, 75, 90),
    },
    "manufacturing": {
        "revenue_growth": R(1, 5, 15),
        "employee_productivity": R(100000, 200000, 400000),
        "digital_transformation": R(20, 42, 80),
    },
    "healthcare": {
        "profit_margin": R(8, 15, 25),
        "employee_productivity": R(120000, 180000, 350000),
        "r_and_d": R(10, 18, 30),
    },
    "finance": {
        "profit_margin": R(15, 25, 40),
        "employee_productivity": R(200000, 350000, 800000),
        "debt_to_equity": R(1.5, 3.0, 5.0),
        "cash_flow": R(10, 20, 35),
    },
}

EUROPEAN_INDEX_METRICS = frozenset(
    {"ebitda_margin", "revenue_growth", "digital_transformation", "roi"}
)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

_INDUSTRIES_BY_ID = {industry.id: industry for industry in INDUSTRIES}
_METRICS_BY_ID = {metric.id: metric for metric in METRICS}


def get_industry(industry_id: str) -> Industry | None:
    return _INDUSTRIES_BY_ID.get(industry_id)


def get_metric(metric_id: str) -> BenchmarkMetric | None:
    return _METRICS_BY_ID.get(metric_id)


def get_subcategory(subcategory_id: str) -> Subcategory | None:
    for industry in INDUSTRIES:
        for sub in industry.subcategories:
            if sub.id == subcategory_id:
                return sub
    return None


def parent_industry_id(subcategory_id: str) -> str | None:
    for industry in INDUSTRIES:
        if any(sub.id == subcategory_id for sub in industry.subcategories):
            return industry.id
    return None


def ranges_for(industry_id: str) -> dict[str, BenchmarkRange]:
    """Default ranges with any industry overrides applied."""
    return {**DEFAULT_RANGES, **INDUSTRY_ADJUSTMENTS.get(industry_id, {})}
