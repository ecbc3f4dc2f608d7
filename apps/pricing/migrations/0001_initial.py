import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='PricingTier',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text="Machine name, e.g. 'standard'", max_length=50, unique=True)),
                ('display_name_en', models.CharField(max_length=100)),
                ('display_name_lo', models.CharField(blank=True, max_length=100, null=True)),
                ('price_lak', models.IntegerField(help_text='Price in Lao Kip', validators=[django.core.validators.MinValueValidator(0)])),
                ('is_active', models.BooleanField(default=True)),
                ('sort_order', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'pricing_tiers',
                'ordering': ['sort_order', 'price_lak'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(price_lak__gte=0), name='pricing_tier_price_non_negative'),
                ],
            },
        ),
    ]
