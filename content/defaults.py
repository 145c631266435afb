import copy

SECTIONS = (
    "about",
    "contact",
    "education",
    "skills",
    "experience",
    "projects",
    "certifications",
    "achievements",
    "settings",
)

PREDEFINED_CATEGORIES = ["Languages", "Frameworks", "Databases", "Web", "Advanced", "Data"]

# Served when the soft skill table alone cannot be read
FALLBACK_SOFT_SKILLS = [
    {"id": "fallback-1", "name": "Communication", "level": 90},
    {"id": "fallback-2", "name": "Teamwork", "level": 85},
    {"id": "fallback-3", "name": "Problem Solving", "level": 95},
    {"id": "fallback-4", "name": "Adaptability", "level": 90},
    {"id": "fallback-5", "name": "Leadership", "level": 80},
]


def _technical(rows):
    return [
        {"id": str(i), "name": name, "level": level, "category": category}
        for i, (name, level, category) in enumerate(rows, start=1)
    ]


DEFAULT_PROFILE_DATA = {
    "about": {
        "bio": (
            "I am a passionate software engineer with expertise in full-stack development, machine learning, "
            "and blockchain technologies. With a strong foundation in computer science and years of hands-on "
            "experience, I create innovative solutions to complex problems."
        ),
        "name": "",
        "image_url": "",
    },
    "contact": {
        "email": "contact@example.com",
        "phone": "+1 (555) 123-4567",
        "location": "San Francisco, CA",
    },
    "education": [
        {
            "id": "1",
            "degree": "Master of Science in Computer Science",
            "institution": "Stanford University",
            "location": "Stanford, CA",
            "startYear": "2018",
            "endYear": "2020",
            "grade": "3.9 GPA",
            "specialization": "Artificial Intelligence",
        },
        {
            "id": "2",
            "degree": "Bachelor of Science in Computer Engineering",
            "institution": "Massachusetts Institute of Technology",
            "location": "Cambridge, MA",
            "startYear": "2014",
            "endYear": "2018",
            "grade": "3.8 GPA",
            "specialization": "Software Systems",
        },
    ],
    "skills": {
        "technical": _technical([
            ("JavaScript", 95, "Languages"),
            ("TypeScript", 90, "Languages"),
            ("Python", 85, "Languages"),
            ("Java", 80, "Languages"),
            ("C++", 75, "Languages"),
            ("React", 95, "Frameworks"),
            ("Node.js", 90, "Frameworks"),
            ("Express", 85, "Frameworks"),
            ("Next.js", 90, "Frameworks"),
            ("Django", 80, "Frameworks"),
            ("TensorFlow", 75, "Data"),
            ("PyTorch", 70, "Data"),
            ("SQL", 85, "Databases"),
            ("MongoDB", 80, "Databases"),
            ("Redis", 75, "Databases"),
            ("Docker", 85, "Advanced"),
            ("Kubernetes", 75, "Advanced"),
            ("AWS", 80, "Advanced"),
            ("Blockchain", 70, "Advanced"),
            ("Smart Contracts", 65, "Advanced"),
            ("HTML", 95, "Web"),
            ("CSS", 90, "Web"),
            ("SASS", 85, "Web"),
            ("Tailwind CSS", 90, "Web"),
        ]),
        "soft": [
            {"id": "1", "name": "Problem Solving", "level": 95},
            {"id": "2", "name": "Communication", "level": 90},
            {"id": "3", "name": "Teamwork", "level": 90},
            {"id": "4", "name": "Leadership", "level": 85},
            {"id": "5", "name": "Time Management", "level": 85},
            {"id": "6", "name": "Adaptability", "level": 90},
            {"id": "7", "name": "Critical Thinking", "level": 95},
            {"id": "8", "name": "Creativity", "level": 85},
        ],
        "customCategories": [],
        "timestamp": 0,
    },
    "experience": [
        {
            "id": "1",
            "title": "Senior Software Engineer",
            "company": "Tech Innovations Inc.",
            "location": "San Francisco, CA",
            "startDate": "2021-01",
            "endDate": "",
            "current": True,
            "description": [
                "Lead a team of 5 engineers in developing a cloud-based SaaS platform",
                "Architected and implemented microservices using Node.js, Express, and MongoDB",
                "Reduced API response time by 40% through optimization and caching strategies",
                "Implemented CI/CD pipelines using GitHub Actions and Docker",
                "Mentored junior developers and conducted code reviews",
            ],
        },
        {
            "id": "2",
            "title": "Full Stack Developer",
            "company": "Digital Solutions LLC",
            "location": "Boston, MA",
            "startDate": "2018-06",
            "endDate": "2020-12",
            "current": False,
            "description": [
                "Developed responsive web applications using React, Redux, and Node.js",
                "Created RESTful APIs and GraphQL endpoints for client-side consumption",
                "Implemented authentication and authorization using JWT and OAuth",
                "Collaborated with UX/UI designers to implement pixel-perfect designs",
                "Participated in agile development processes with two-week sprints",
            ],
        },
        {
            "id": "3",
            "title": "Software Engineering Intern",
            "company": "Global Tech Corp",
            "location": "Seattle, WA",
            "startDate": "2017-05",
            "endDate": "2017-08",
            "current": False,
            "description": [
                "Assisted in developing features for an e-commerce platform",
                "Fixed bugs and improved performance of existing codebase",
                "Participated in daily stand-up meetings and sprint planning",
                "Gained experience with React, Node.js, and PostgreSQL",
            ],
        },
    ],
    "projects": {
        "items": [
            {
                "id": "1",
                "title": "AI-Powered Financial Advisor",
                "category": "Machine Learning",
                "category_id": 1,
                "projectType": "",
                "teamType": "solo",
                "description": (
                    "A financial advisory application that uses machine learning algorithms to provide "
                    "personalized investment recommendations based on user goals and risk tolerance."
                ),
                "image": "/placeholder.svg?height=400&width=600",
                "github": "https://github.com/username/ai-financial-advisor",
                "demo": "https://ai-financial-advisor.example.com",
                "linkedin": "https://linkedin.com/in/username",
                "features": [
                    "Personalized investment recommendations",
                    "Risk assessment algorithms",
                    "Portfolio optimization",
                    "Market trend analysis",
                    "Goal-based planning",
                ],
                "technologies": ["Python", "TensorFlow", "Flask", "React", "PostgreSQL", "Docker"],
                "date": "2023-01-01",
            },
            {
                "id": "2",
                "title": "Decentralized Marketplace",
                "category": "Blockchain",
                "category_id": 2,
                "projectType": "",
                "teamType": "solo",
                "description": (
                    "A decentralized marketplace built on Ethereum blockchain that allows users to buy and sell "
                    "digital products without intermediaries, using smart contracts for secure transactions."
                ),
                "image": "/placeholder.svg?height=400&width=600",
                "github": "https://github.com/username/defi-marketplace",
                "demo": "https://defi-marketplace.example.com",
                "linkedin": "https://linkedin.com/in/username",
                "features": [
                    "Smart contract-based transactions",
                    "Decentralized authentication",
                    "Digital product listings",
                    "Escrow system",
                    "Rating and review system",
                ],
                "technologies": ["Solidity", "Ethereum", "Web3.js", "React", "Node.js", "IPFS"],
                "date": "2023-02-15",
            },
            {
                "id": "3",
                "title": "Real-time Collaboration Tool",
                "category": "Web Application",
                "category_id": 3,
                "projectType": "",
                "teamType": "team",
                "description": (
                    "A real-time collaboration tool that allows teams to work together on documents, code, and "
                    "designs simultaneously, with features like chat, comments, and version history."
                ),
                "image": "/placeholder.svg?height=400&width=600",
                "github": "https://github.com/username/collab-tool",
                "demo": "https://collab-tool.example.com",
                "linkedin": "https://linkedin.com/in/username",
                "features": [
                    "Real-time document editing",
                    "Code collaboration with syntax highlighting",
                    "Design collaboration tools",
                    "Chat and commenting system",
                    "Version history and rollback",
                ],
                "technologies": ["React", "Socket.io", "Node.js", "MongoDB", "Redis", "AWS"],
                "date": "2023-03-20",
            },
        ],
        "categories": [
            {"id": 1, "name": "Machine Learning"},
            {"id": 2, "name": "Blockchain"},
            {"id": 3, "name": "Web Application"},
        ],
    },
    "certifications": [
        {
            "id": "1",
            "title": "AWS Certified Solutions Architect",
            "issuer": "Amazon Web Services",
            "date": "2022-03",
            "certificateUrl": "https://example.com/certificate/aws-architect",
        },
        {
            "id": "2",
            "title": "TensorFlow Developer Certificate",
            "issuer": "Google",
            "date": "2021-08",
            "certificateUrl": "https://example.com/certificate/tensorflow-dev",
        },
        {
            "id": "3",
            "title": "Certified Blockchain Developer",
            "issuer": "Blockchain Council",
            "date": "2021-05",
            "certificateUrl": "https://example.com/certificate/blockchain-dev",
        },
        {
            "id": "4",
            "title": "Professional Scrum Master I",
            "issuer": "Scrum.org",
            "date": "2020-11",
            "certificateUrl": "https://example.com/certificate/scrum-master",
        },
    ],
    "achievements": [
        {
            "id": "1",
            "title": "First Place Hackathon Winner",
            "description": "Won first place in the annual tech hackathon with an AI-powered solution for healthcare.",
            "date": "2022-06",
            "issuer": "TechCrunch Disrupt",
            "url": "https://example.com/hackathon-winners-2022",
        },
        {
            "id": "2",
            "title": "Open Source Contributor of the Month",
            "description": "Recognized for significant contributions to the React ecosystem.",
            "date": "2021-11",
            "issuer": "GitHub",
            "url": "https://example.com/oss-contributors-2021",
        },
        {
            "id": "3",
            "title": "Published Research Paper",
            "description": "Co-authored a research paper on efficient deep learning algorithms for edge devices.",
            "date": "2020-09",
            "issuer": "IEEE International Conference on Machine Learning",
            "url": "https://example.com/research-paper-2020",
        },
    ],
    "settings": {
        "resumeLink": "https://drive.google.com/uc?export=download&id=1JVLB0XEdKztxMybpN-mAg_ZXxxbuR7ZV",
    },
}


def default_profile_data() -> dict:
    return copy.deepcopy(DEFAULT_PROFILE_DATA)
