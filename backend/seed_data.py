"""Sample content loaded into a fresh store."""

from datetime import datetime, timedelta


def sample_articles(now: datetime) -> list[dict]:
    return [
        {
            'title': 'Kenya Parliament Passes New Economic Stimulus Package',
            'excerpt': (
                'The National Assembly approved a comprehensive economic stimulus package aimed at supporting '
                'small businesses and creating employment opportunities for youth across the country.'
            ),
            'content': 'The Kenyan Parliament has unanimously passed a landmark economic stimulus package...',
            'category': 'Politics',
            'source': 'The Daily Nation',
            'author': 'Jane Wanjiku',
            'image_url': 'https://images.unsplash.com/photo-1551836022-d5d88e9218df?w=600&h=300&fit=crop',
            'verified': True,
            'published_at': now - timedelta(hours=2),
        },
        {
            'title': 'Nairobi County Unveils New Urban Development Plan',
            'excerpt': (
                'The county government announced a comprehensive urban development strategy focusing on '
                'affordable housing and improved transportation infrastructure.'
            ),
            'content': 'Nairobi County Governor announced a comprehensive urban development plan...',
            'category': 'Infrastructure',
            'source': 'Standard Digital',
            'author': 'Peter Maina',
            'image_url': 'https://images.unsplash.com/photo-1554774853-aae0a22c8aa4?w=600&h=300&fit=crop',
            'verified': True,
            'published_at': now - timedelta(hours=4),
        },
        {
            'title': 'New University Scholarship Program Launched',
            'excerpt': (
                'The Ministry of Education announced a new scholarship initiative targeting students from '
                'marginalized communities across Kenya.'
            ),
            'content': 'The Ministry of Education has launched a comprehensive scholarship program...',
            'category': 'Education',
            'source': 'Capital FM',
            'author': 'Sarah Kiprotich',
            'image_url': 'https://images.unsplash.com/photo-1523240795612-9a054b0db644?w=600&h=300&fit=crop',
            'verified': True,
            'published_at': now - timedelta(hours=6),
        },
        {
            'title': 'Healthcare Workers Strike Called Off',
            'excerpt': (
                'The Kenya Medical Practitioners union reached an agreement with the government ending the '
                'month-long strike action.'
            ),
            'content': 'After weeks of negotiations, the healthcare workers strike has been called off...',
            'category': 'Health',
            'source': 'Nation Media',
            'author': 'Dr. James Mwangi',
            'image_url': 'https://images.unsplash.com/photo-1576091160399-112ba8d25d1f?w=600&h=300&fit=crop',
            'verified': True,
            'published_at': now - timedelta(hours=8),
        },
        {
            'title': 'Youth Employment Initiative Creates 10,000 Jobs',
            'excerpt': (
                'A new government initiative in partnership with private sector aims to create sustainable '
                'employment opportunities for young Kenyans.'
            ),
            'content': 'The government has launched an ambitious youth employment initiative...',
            'category': 'Economy',
            'source': 'Business Daily',
            'author': 'Mary Njoki',
            'image_url': 'https://images.unsplash.com/photo-1522202176988-66273c2fd55f?w=600&h=300&fit=crop',
            'verified': True,
            'published_at': now - timedelta(hours=12),
        },
    ]


def sample_civic_alerts(now: datetime) -> list[dict]:
    return [
        {
            'title': 'Voter Registration',
            'message': 'IEBC opens voter registration centers across Nairobi. Register by December 15th.',
            'type': 'info',
            'category': 'Elections',
            'action_text': 'Learn More',
            'action_url': '#',
            'is_active': True,
            'created_at': now - timedelta(days=2),
        },
        {
            'title': 'Public Hearing',
            'message': 'County budget hearing scheduled for Thursday at KICC. Public participation welcome.',
            'type': 'info',
            'category': 'Budget',
            'action_text': 'Attend',
            'action_url': '#',
            'is_active': True,
            'created_at': now - timedelta(hours=5),
        },
        {
            'title': 'Tax Deadline',
            'message': 'KRA reminds taxpayers of the December 31st deadline for annual returns filing.',
            'type': 'warning',
            'category': 'Tax',
            'action_text': 'File Now',
            'action_url': '#',
            'is_active': True,
            'created_at': now - timedelta(days=1),
        },
    ]


def sample_jobs(now: datetime) -> list[dict]:
    return [
        {
            'title': 'Software Developer',
            'company': 'Safaricom PLC',
            'location': 'Nairobi, Kenya',
            'type': 'full-time',
            'description': 'We are looking for a talented software developer to join our digital innovation team.',
            'requirements': (
                "Bachelor's degree in Computer Science, 2+ years experience in software development, "
                'proficiency in JavaScript and Python.'
            ),
            'salary': 'KSh 80,000 - 120,000',
            'application_url': 'https://safaricom.co.ke/careers',
            'posted_at': now,
            'expires_at': now + timedelta(days=30),
        },
        {
            'title': 'Marketing Intern',
            'company': 'Equity Bank',
            'location': 'Nairobi, Kenya',
            'type': 'internship',
            'description': (
                'Join our marketing team as an intern and gain hands-on experience in digital marketing '
                'and brand management.'
            ),
            'requirements': (
                'Currently pursuing a degree in Marketing, Business, or related field. '
                'Strong communication skills and creativity.'
            ),
            'salary': 'KSh 25,000 stipend',
            'application_url': 'https://equitybank.co.ke/careers',
            'posted_at': now - timedelta(minutes=1),
            'expires_at': now + timedelta(days=15),
        },
        {
            'title': 'Junior Accountant',
            'company': 'Kenya Commercial Bank',
            'location': 'Mombasa, Kenya',
            'type': 'full-time',
            'description': 'We are seeking a detail-oriented junior accountant to support our finance team.',
            'requirements': "Bachelor's degree in Accounting or Finance, CPA Part I preferred, 1+ year experience.",
            'salary': 'KSh 60,000 - 80,000',
            'application_url': 'https://kcbgroup.com/careers',
            'posted_at': now - timedelta(minutes=2),
            'expires_at': now + timedelta(days=20),
        },
    ]
