import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('pricing', '0002_promocode'),
        ('rentals', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PromoCodeUse',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('anonymous_id', models.CharField(blank=True, max_length=100, null=True)),
                ('used_at', models.DateTimeField(auto_now_add=True)),
                ('promo_code', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='uses', to='pricing.promocode')),
                ('rental', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='promo_code_uses', to='rentals.rental')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'promo_code_uses',
                'ordering': ['-used_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('promo_code', 'rental'), name='promo_code_use_once_per_rental'),
                ],
            },
        ),
    ]
