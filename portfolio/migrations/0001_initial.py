import blog.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('slug', models.SlugField(max_length=200, unique=True)),
                ('title', models.CharField(max_length=99)),
                ('description', models.TextField(blank=True)),
                ('date', models.DateField()),
                ('tags', models.JSONField(blank=True, default=list, validators=[blog.models.validate_tags])),
                ('published', models.BooleanField(default=True)),
                ('body', models.TextField(blank=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('status', models.CharField(choices=[('completed', 'Completed'), ('in-progress', 'In Progress'), ('archived', 'Archived')], default='completed', max_length=20)),
                ('featured', models.BooleanField(default=False)),
                ('live_url', models.URLField(blank=True)),
                ('github_url', models.URLField(blank=True)),
            ],
            options={
                'ordering': ('-featured', '-date'),
                'abstract': False,
            },
        ),
    ]
