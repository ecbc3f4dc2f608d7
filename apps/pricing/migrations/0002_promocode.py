import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('movies', '0001_initial'),
        ('pricing', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PromoCode',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.CharField(help_text='Stored uppercase', max_length=50, unique=True)),
                ('discount_type', models.CharField(choices=[('free', 'Free'), ('percentage', 'Percentage'), ('fixed', 'Fixed amount')], max_length=20)),
                ('discount_value', models.IntegerField(blank=True, help_text='Percent (1-100) or amount in LAK; unused for free codes', null=True)),
                ('max_uses', models.PositiveIntegerField(blank=True, null=True)),
                ('uses_count', models.PositiveIntegerField(default=0)),
                ('valid_from', models.DateTimeField(blank=True, null=True)),
                ('valid_to', models.DateTimeField(blank=True, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('movie', models.ForeignKey(blank=True, help_text='Restrict the code to a single movie', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='promo_codes', to='movies.movie')),
            ],
            options={
                'db_table': 'promo_codes',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['is_active', 'valid_from', 'valid_to'], name='promo_code_active_window_idx'),
                ],
            },
        ),
    ]
