from django.core.management.base import BaseCommand
from apps.pricing.models import PricingTier


class Command(BaseCommand):
    help = 'Set up the default rental pricing tiers'

    def handle(self, *args, **options):
        """Create or update pricing tiers"""
        tiers = [
            {
                'name': 'budget',
                'display_name_en': 'Budget',
                'display_name_lo': 'ລາຄາປະຢັດ',
                'price_lak': 50000,
                'sort_order': 0,
            },
            {
                'name': 'standard',
                'display_name_en': 'Standard',
                'display_name_lo': 'ມາດຕະຖານ',
                'price_lak': 75000,
                'sort_order': 1,
            },
            {
                'name': 'premium',
                'display_name_en': 'Premium',
                'display_name_lo': 'ພຣີມຽມ',
                'price_lak': 100000,
                'sort_order': 2,
            },
        ]

        created_count = 0
        updated_count = 0

        for tier_data in tiers:
            tier, created = PricingTier.objects.get_or_create(
                name=tier_data['name'],
                defaults=tier_data
            )

            if created:
                created_count += 1
                self.stdout.write(
                    self.style.SUCCESS(f'Created tier: {tier.display_name_en}')
                )
            else:
                for key, value in tier_data.items():
                    if key != 'name':
                        setattr(tier, key, value)
                tier.save()
                updated_count += 1
                self.stdout.write(
                    self.style.WARNING(f'Updated tier: {tier.display_name_en}')
                )

        self.stdout.write(
            self.style.SUCCESS(
                f'Successfully set up pricing tiers: {created_count} created, {updated_count} updated'
            )
        )
