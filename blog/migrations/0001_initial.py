import blog.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Post',
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
            ],
            options={
                'ordering': ('-date',),
                'abstract': False,
            },
        ),
    ]
