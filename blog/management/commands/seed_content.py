# blog/management/commands/seed_content.py

import random
from django.core.management.base import BaseCommand
from django.utils.text import slugify
from faker import Faker

from blog.models import Post
from portfolio.models import Project

TAGS = ['Python', 'Django', 'Go', 'Rust', 'Docker', 'PostgreSQL', 'Next.js', 'Linux', 'CLI']


class Command(BaseCommand):
    help = "Seed the database with fake posts and projects for local development"

    def add_arguments(self, parser):
        parser.add_argument(
            '--posts',
            type=int,
            default=12,
            help='How many posts to create (default: 12)'
        )
        parser.add_argument(
            '--projects',
            type=int,
            default=8,
            help='How many projects to create (default: 8)'
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Random seed for reproducible data'
        )

    def handle(self, *args, **options):
        fake = Faker('en_US')
        if options['seed'] is not None:
            Faker.seed(options['seed'])
            random.seed(options['seed'])

        posts = 0
        for _ in range(options['posts']):
            Post.objects.create(**self.fake_item(fake))
            posts += 1

        projects = 0
        for _ in range(options['projects']):
            Project.objects.create(
                **self.fake_item(fake),
                status=random.choice(Project.Status.values),
                featured=random.random() < 0.25,
                live_url=fake.url() if random.random() < 0.5 else '',
                github_url=f"https://github.com/{fake.user_name()}/{fake.slug()}",
            )
            projects += 1

        self.stdout.write(self.style.SUCCESS(
            f"Successfully created {posts} posts and {projects} projects."
        ))

    def fake_item(self, fake):
        title = fake.sentence(nb_words=5).rstrip('.')
        slug = slugify(title)
        # Если вдруг уже есть такой, добавляем случайный суффикс
        while Post.objects.filter(slug=slug).exists() or Project.objects.filter(slug=slug).exists():
            slug = f"{slugify(title)}-{fake.random_number(digits=4)}"

        return {
            'slug': slug,
            'title': title,
            'description': fake.sentence(nb_words=12),
            'date': fake.date_between(start_date='-3y', end_date='today'),
            'tags': random.sample(TAGS, k=random.randint(0, 3)),
            'published': random.random() > 0.1,
            'body': '\n\n'.join(fake.paragraphs(nb=4)),
        }
